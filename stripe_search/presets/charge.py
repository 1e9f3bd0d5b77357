"""Ready-made queries against the charges search index."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from ..query import SearchQueryBuilder, stripe_query

SECONDS_PER_DAY = 24 * 60 * 60


def _days_ago(days: int, now: Optional[datetime]) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp()) - days * SECONDS_PER_DAY


def _status_since(status: str, days: int, now: Optional[datetime]) -> SearchQueryBuilder:
    return (
        stripe_query()
        .field("status")
        .equals(status)
        .and_()
        .field("created")
        .greater_than_or_equal(_days_ago(days, now))
    )


class ChargeTemplates:
    """Common charge queries; each returns a builder that can be chained further."""

    def failed_in_last_days(self, days: int, now: Optional[datetime] = None) -> SearchQueryBuilder:
        """Failed charges created within the last ``days`` days."""
        return _status_since("failed", days, now)

    def succeeded_in_last_days(self, days: int, now: Optional[datetime] = None) -> SearchQueryBuilder:
        """Succeeded charges created within the last ``days`` days."""
        return _status_since("succeeded", days, now)

    def high_value(self, amount: Union[int, float]) -> SearchQueryBuilder:
        return stripe_query().field("amount").greater_than_or_equal(amount)

    def amount_between(self, low: Union[int, float], high: Union[int, float]) -> SearchQueryBuilder:
        return stripe_query().field("amount").between(low, high)

    def by_currency(self, currency: str) -> SearchQueryBuilder:
        """Charges in one currency, given as a lowercase ISO code such as ``usd``."""
        return stripe_query().field("currency").equals(currency)


charge_templates = ChargeTemplates()
