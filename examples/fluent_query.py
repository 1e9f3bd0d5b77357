"""Build a few Stripe Search queries with the fluent builder and the presets."""

from __future__ import annotations

from stripe_search import charge_templates, customer_query, stripe_query
from stripe_search.query import MixedConnectiveError


def main() -> None:
    donations = (
        stripe_query()
        .field("email")
        .equals("amy@rocketrides.io")
        .and_()
        .metadata("donation-id")
        .equals("asdf-jkl")
        .and_()
        .not_("currency")
        .equals("jpy")
        .build()
    )
    print(f"donations: {donations}")

    range_query = stripe_query().field("amount").between(1000, 5000).build()
    print(f"amount range: {range_query}")

    customers = customer_query().email().contains("@example.com").or_().metadata("plan").is_null().build()
    print(f"customers: {customers}")

    recent_failures = charge_templates.failed_in_last_days(7).and_().field("amount").greater_than(5000)
    print(f"recent failures: {recent_failures.build()}")

    try:
        recent_failures.or_()
    except MixedConnectiveError as err:
        print(f"rejected: {err} [{err.code}]")


if __name__ == "__main__":
    main()
