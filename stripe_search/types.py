"""Clause records accumulated by the search query builder."""

from __future__ import annotations

from typing import Optional, Union

from typing_extensions import Literal, TypedDict

LogicalOperator = Literal["AND", "OR"]
ClauseType = Literal["field", "logical"]
NumericOperator = Literal[">", "<", ">=", "<="]
StringOperator = Literal[":", "~"]

ClauseValue = Optional[Union[str, int, float]]


class FieldClause(TypedDict):
    """A single ``<field><operator><value>`` comparison."""

    type: Literal["field"]
    field: str
    operator: Union[NumericOperator, StringOperator]
    value: ClauseValue
    negated: bool


class LogicalClause(TypedDict):
    type: Literal["logical"]
    operator: LogicalOperator


QueryClause = Union[FieldClause, LogicalClause]
