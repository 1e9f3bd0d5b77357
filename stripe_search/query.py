"""Fluent builder for Stripe Search API query strings."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from loguru import logger

from .escape import escape_metadata_key, format_value
from .types import (
    ClauseValue,
    FieldClause,
    LogicalClause,
    LogicalOperator,
    NumericOperator,
    QueryClause,
    StringOperator,
)

MIN_SUBSTRING_LENGTH = 3


class ErrorCode:
    """Error codes attached to every query builder exception."""
    UNKNOWN = "UNKNOWN"
    INVALID_ARG = "INVALID_ARG"
    SUBSTRING_TOO_SHORT = "SUBSTRING_TOO_SHORT"
    MIXED_CONNECTIVE = "MIXED_CONNECTIVE"


class SearchQueryError(Exception):
    """Base exception class for all query builder errors."""

    def __init__(self, message: str, code: str = ErrorCode.UNKNOWN):
        super().__init__(message)
        self.code = code


class QueryValidationError(SearchQueryError, ValueError):
    """Error raised when the builder is given input the grammar cannot express."""

    def __init__(self, message: str, code: str = ErrorCode.INVALID_ARG):
        super().__init__(message, code)


class SubstringTooShortError(QueryValidationError):
    """Error raised when a substring match value is shorter than three characters."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SUBSTRING_TOO_SHORT)


class MixedConnectiveError(QueryValidationError):
    """Error raised when AND and OR are combined within one query."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MIXED_CONNECTIVE)


def _ensure_value(value: Any, ctx: str) -> ClauseValue:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise TypeError(f"{ctx} requires a string, number or None, got {type(value)!r}")


def _ensure_number(value: Any, ctx: str) -> Union[int, float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    raise TypeError(f"{ctx} requires a numeric value, got {type(value)!r}")


def _ensure_substring(value: Any, ctx: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{ctx} requires a string value")
    if len(value) < MIN_SUBSTRING_LENGTH:
        logger.debug("rejecting {} with {} characters", ctx, len(value))
        raise SubstringTooShortError(
            f"Substring match requires at least {MIN_SUBSTRING_LENGTH} characters"
        )
    return value


class FieldClauseBuilder:
    """Comparisons available on a plain field."""

    __slots__ = ("_field", "_negated", "_builder")

    def __init__(self, field: str, negated: bool, builder: "SearchQueryBuilder") -> None:
        self._field = field
        self._negated = negated
        self._builder = builder

    def _add_clause(
        self,
        operator: Union[NumericOperator, StringOperator],
        value: ClauseValue,
    ) -> "SearchQueryBuilder":
        return self._builder.add_field_clause(
            {
                "type": "field",
                "field": self._field,
                "operator": operator,
                "value": value,
                "negated": self._negated,
            }
        )

    def equals(self, value: ClauseValue) -> "SearchQueryBuilder":
        """Exact match (``:``)."""
        return self._add_clause(":", _ensure_value(value, "equals()"))

    def contains(self, value: str) -> "SearchQueryBuilder":
        """Substring match (``~``); the value needs at least three characters."""
        return self._add_clause("~", _ensure_substring(value, "contains()"))

    def greater_than(self, value: Union[int, float]) -> "SearchQueryBuilder":
        return self._add_clause(">", _ensure_number(value, "greater_than()"))

    def less_than(self, value: Union[int, float]) -> "SearchQueryBuilder":
        return self._add_clause("<", _ensure_number(value, "less_than()"))

    def greater_than_or_equal(self, value: Union[int, float]) -> "SearchQueryBuilder":
        return self._add_clause(">=", _ensure_number(value, "greater_than_or_equal()"))

    def less_than_or_equal(self, value: Union[int, float]) -> "SearchQueryBuilder":
        return self._add_clause("<=", _ensure_number(value, "less_than_or_equal()"))

    def is_null(self) -> "SearchQueryBuilder":
        """Match records where the field is missing or empty."""
        return self._add_clause(":", None)

    def between(self, low: Union[int, float], high: Union[int, float]) -> "SearchQueryBuilder":
        """Inclusive range, rendered as ``field>=low AND field<=high``.

        The joining AND counts towards the query's connective, so calling
        this inside an OR chain raises MixedConnectiveError.
        """
        low = _ensure_number(low, "between() low")
        high = _ensure_number(high, "between() high")
        self._builder._ensure_connective("AND")
        self._add_clause(">=", low)
        self._builder.and_()
        return self._add_clause("<=", high)


class MetadataClauseBuilder:
    """Comparisons available on a ``metadata["key"]`` lookup."""

    __slots__ = ("_field", "_negated", "_builder")

    def __init__(self, key: str, negated: bool, builder: "SearchQueryBuilder") -> None:
        self._field = f"metadata[{escape_metadata_key(key)}]"
        self._negated = negated
        self._builder = builder

    def _add_clause(self, operator: StringOperator, value: ClauseValue) -> "SearchQueryBuilder":
        return self._builder.add_field_clause(
            {
                "type": "field",
                "field": self._field,
                "operator": operator,
                "value": value,
                "negated": self._negated,
            }
        )

    def equals(self, value: ClauseValue) -> "SearchQueryBuilder":
        return self._add_clause(":", _ensure_value(value, "equals()"))

    def contains(self, value: str) -> "SearchQueryBuilder":
        return self._add_clause("~", _ensure_substring(value, "contains()"))

    def is_null(self) -> "SearchQueryBuilder":
        """Match records where the metadata key is not set."""
        return self._add_clause(":", None)


class SearchQueryBuilder:
    """Accumulates clauses in call order and renders them as a query string.

    A query may join its clauses with AND or with OR, never both. The first
    connective used locks the builder until reset().
    """

    def __init__(self) -> None:
        self._clauses: List[QueryClause] = []
        self._logical_operator: Optional[LogicalOperator] = None
        self.logger = logger.bind(builder="stripe_search")

    @property
    def clauses(self) -> List[QueryClause]:
        return [dict(clause) for clause in self._clauses]  # type: ignore[misc]

    @property
    def logical_operator(self) -> Optional[LogicalOperator]:
        return self._logical_operator

    def add_field_clause(self, clause: FieldClause) -> "SearchQueryBuilder":
        self._clauses.append(clause)
        return self

    def field(self, name: str) -> FieldClauseBuilder:
        return FieldClauseBuilder(name, False, self)

    def not_(self, name: str) -> FieldClauseBuilder:
        """Start a negated clause (``-field...``)."""
        return FieldClauseBuilder(name, True, self)

    def metadata(self, key: str) -> MetadataClauseBuilder:
        return MetadataClauseBuilder(key, False, self)

    def not_metadata(self, key: str) -> MetadataClauseBuilder:
        return MetadataClauseBuilder(key, True, self)

    def _ensure_connective(self, operator: LogicalOperator) -> None:
        if self._logical_operator is not None and self._logical_operator != operator:
            self.logger.debug(
                "rejecting {} on a query locked to {}", operator, self._logical_operator
            )
            raise MixedConnectiveError("Cannot mix AND and OR operators in a single query")

    def _append_logical(self, operator: LogicalOperator) -> "SearchQueryBuilder":
        self._ensure_connective(operator)
        self._logical_operator = operator
        clause: LogicalClause = {"type": "logical", "operator": operator}
        self._clauses.append(clause)
        return self

    def and_(self) -> "SearchQueryBuilder":
        """Join the previous and next clauses with AND.

        Raises:
            MixedConnectiveError: if OR has already been used.
        """
        return self._append_logical("AND")

    def or_(self) -> "SearchQueryBuilder":
        """Join the previous and next clauses with OR.

        Raises:
            MixedConnectiveError: if AND has already been used.
        """
        return self._append_logical("OR")

    def build(self) -> str:
        """Render the query string.

        Logical operators before the first field clause are dropped, runs of
        operators collapse to the first one and a trailing operator is
        removed. Building never mutates the builder.
        """
        if not self._clauses:
            return ""

        parts: List[str] = []
        last_was_logical = False
        has_field_clause = False

        for clause in self._clauses:
            if clause["type"] == "field":
                prefix = "-" if clause["negated"] else ""
                value = format_value(clause["value"])
                parts.append(f"{prefix}{clause['field']}{clause['operator']}{value}")
                last_was_logical = False
                has_field_clause = True
            elif clause["type"] == "logical":
                if not has_field_clause:
                    continue
                if not last_was_logical:
                    parts.append(clause["operator"])
                    last_was_logical = True

        if last_was_logical:
            parts.pop()

        query = " ".join(parts)
        self.logger.debug("built query from {} clauses ({} chars)", len(self._clauses), len(query))
        return query

    def reset(self) -> "SearchQueryBuilder":
        self._clauses = []
        self._logical_operator = None
        return self

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"SearchQueryBuilder({self.build()!r})"


def stripe_query() -> SearchQueryBuilder:
    """Create an empty query builder."""
    return SearchQueryBuilder()
