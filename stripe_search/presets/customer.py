"""Customer-scoped facade over the generic search query builder."""

from __future__ import annotations

from typing import Union

from ..query import FieldClauseBuilder, MetadataClauseBuilder, SearchQueryBuilder, stripe_query
from ..types import ClauseValue


class CustomerFieldBuilder:
    """Comparisons on one of the searchable customer fields."""

    def __init__(self, customer: "CustomerQueryBuilder", field: str, negated: bool = False) -> None:
        self._customer = customer
        self._field = field
        self._negated = negated

    def _target(self) -> FieldClauseBuilder:
        builder = self._customer.builder
        return builder.not_(self._field) if self._negated else builder.field(self._field)

    def not_(self) -> "CustomerFieldBuilder":
        return CustomerFieldBuilder(self._customer, self._field, True)

    def equals(self, value: ClauseValue) -> "CustomerQueryBuilder":
        self._target().equals(value)
        return self._customer

    def contains(self, value: str) -> "CustomerQueryBuilder":
        self._target().contains(value)
        return self._customer

    def greater_than(self, value: Union[int, float]) -> "CustomerQueryBuilder":
        self._target().greater_than(value)
        return self._customer

    def less_than(self, value: Union[int, float]) -> "CustomerQueryBuilder":
        self._target().less_than(value)
        return self._customer

    def greater_than_or_equal(self, value: Union[int, float]) -> "CustomerQueryBuilder":
        self._target().greater_than_or_equal(value)
        return self._customer

    def less_than_or_equal(self, value: Union[int, float]) -> "CustomerQueryBuilder":
        self._target().less_than_or_equal(value)
        return self._customer

    def between(self, low: Union[int, float], high: Union[int, float]) -> "CustomerQueryBuilder":
        self._target().between(low, high)
        return self._customer

    def is_null(self) -> "CustomerQueryBuilder":
        self._target().is_null()
        return self._customer


class CustomerMetadataFieldBuilder:
    def __init__(self, customer: "CustomerQueryBuilder", key: str, negated: bool = False) -> None:
        self._customer = customer
        self._key = key
        self._negated = negated

    def _target(self) -> MetadataClauseBuilder:
        builder = self._customer.builder
        return builder.not_metadata(self._key) if self._negated else builder.metadata(self._key)

    def equals(self, value: ClauseValue) -> "CustomerQueryBuilder":
        self._target().equals(value)
        return self._customer

    def contains(self, value: str) -> "CustomerQueryBuilder":
        self._target().contains(value)
        return self._customer

    def is_null(self) -> "CustomerQueryBuilder":
        self._target().is_null()
        return self._customer


class CustomerQueryBuilder:
    """Query builder restricted to the fields the customers search index exposes."""

    def __init__(self) -> None:
        self.builder: SearchQueryBuilder = stripe_query()

    def email(self) -> CustomerFieldBuilder:
        return CustomerFieldBuilder(self, "email")

    def name(self) -> CustomerFieldBuilder:
        return CustomerFieldBuilder(self, "name")

    def phone(self) -> CustomerFieldBuilder:
        return CustomerFieldBuilder(self, "phone")

    def description(self) -> CustomerFieldBuilder:
        return CustomerFieldBuilder(self, "description")

    def created(self) -> CustomerFieldBuilder:
        return CustomerFieldBuilder(self, "created")

    def metadata(self, key: str) -> CustomerMetadataFieldBuilder:
        return CustomerMetadataFieldBuilder(self, key)

    def and_(self) -> "CustomerQueryBuilder":
        self.builder.and_()
        return self

    def or_(self) -> "CustomerQueryBuilder":
        self.builder.or_()
        return self

    def build(self) -> str:
        return self.builder.build()

    def reset(self) -> "CustomerQueryBuilder":
        self.builder.reset()
        return self


def customer_query() -> CustomerQueryBuilder:
    return CustomerQueryBuilder()
