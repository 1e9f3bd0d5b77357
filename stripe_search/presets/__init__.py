"""Resource-specific presets built on the generic query builder."""

from .charge import ChargeTemplates, charge_templates
from .customer import (
    CustomerFieldBuilder,
    CustomerMetadataFieldBuilder,
    CustomerQueryBuilder,
    customer_query,
)

__all__ = [
    "ChargeTemplates",
    "charge_templates",
    "CustomerFieldBuilder",
    "CustomerMetadataFieldBuilder",
    "CustomerQueryBuilder",
    "customer_query",
]
