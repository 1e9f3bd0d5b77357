from datetime import datetime, timezone

import pytest

from stripe_search import MixedConnectiveError, SearchQueryBuilder, charge_templates, customer_query
from stripe_search.presets.charge import SECONDS_PER_DAY

NOW = datetime(2024, 1, 15, tzinfo=timezone.utc)


def test_customer_email() -> None:
    assert customer_query().email().equals("test@example.com").build() == 'email:"test@example.com"'


def test_customer_name_contains() -> None:
    assert customer_query().name().contains("John").build() == 'name~"John"'


def test_customer_created_comparison() -> None:
    assert customer_query().created().greater_than(1704067200).build() == "created>1704067200"


def test_customer_fields_combined() -> None:
    query = customer_query().email().equals("test@example.com").and_().name().contains("John").build()
    assert query == 'email:"test@example.com" AND name~"John"'


def test_customer_metadata() -> None:
    assert customer_query().metadata("plan").equals("premium").build() == 'metadata["plan"]:"premium"'


def test_customer_negation() -> None:
    assert customer_query().email().not_().equals("blocked@example.com").build() == '-email:"blocked@example.com"'


def test_customer_complex_query() -> None:
    query = (
        customer_query()
        .created()
        .greater_than(1704067200)
        .and_()
        .email()
        .contains("@example.com")
        .and_()
        .metadata("plan")
        .equals("premium")
        .build()
    )
    assert query == 'created>1704067200 AND email~"@example.com" AND metadata["plan"]:"premium"'


def test_customer_phone_description_and_null() -> None:
    query = customer_query().phone().is_null().or_().description().contains("vip").build()
    assert query == 'phone:null OR description~"vip"'


def test_customer_created_between() -> None:
    assert customer_query().created().between(1, 2).build() == "created>=1 AND created<=2"


def test_customer_shares_connective_lock() -> None:
    customer = customer_query().email().equals("a@b.co").or_()
    with pytest.raises(MixedConnectiveError):
        customer.and_()
    customer.reset()
    assert customer.build() == ""
    assert isinstance(customer.builder, SearchQueryBuilder)


def test_failed_in_last_days() -> None:
    assert charge_templates.failed_in_last_days(7, now=NOW).build() == 'status:"failed" AND created>=1704672000'
    assert charge_templates.failed_in_last_days(30, now=NOW).build() == 'status:"failed" AND created>=1702684800'


def test_succeeded_in_last_days() -> None:
    query = charge_templates.succeeded_in_last_days(7, now=NOW).build()
    assert query == 'status:"succeeded" AND created>=1704672000'


def test_naive_now_is_treated_as_utc() -> None:
    query = charge_templates.failed_in_last_days(7, now=datetime(2024, 1, 15)).build()
    assert query == 'status:"failed" AND created>=1704672000'


def test_failed_in_last_days_defaults_to_current_time() -> None:
    before = int(datetime.now(timezone.utc).timestamp()) - SECONDS_PER_DAY
    builder = charge_templates.failed_in_last_days(1)
    after = int(datetime.now(timezone.utc).timestamp()) - SECONDS_PER_DAY
    created = builder.clauses[-1]
    assert created["operator"] == ">="
    assert before <= created["value"] <= after


def test_high_value() -> None:
    assert charge_templates.high_value(100000).build() == "amount>=100000"
    assert charge_templates.high_value(50000).build() == "amount>=50000"


def test_amount_between() -> None:
    assert charge_templates.amount_between(1000, 5000).build() == "amount>=1000 AND amount<=5000"


def test_by_currency() -> None:
    assert charge_templates.by_currency("usd").build() == 'currency:"usd"'
    assert charge_templates.by_currency("eur").build() == 'currency:"eur"'


def test_templates_keep_chaining() -> None:
    query = charge_templates.failed_in_last_days(7, now=NOW).and_().field("amount").greater_than(5000).build()
    assert query == 'status:"failed" AND created>=1704672000 AND amount>5000'


def test_templates_keep_connective_lock() -> None:
    with pytest.raises(MixedConnectiveError):
        charge_templates.amount_between(1000, 5000).or_()
