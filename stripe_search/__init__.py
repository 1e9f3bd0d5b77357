"""Fluent builder for Stripe Search API query strings."""

from loguru import logger

from . import presets
from .escape import escape_metadata_key, escape_string_value, format_value
from .presets import CustomerQueryBuilder, charge_templates, customer_query
from .query import (
    FieldClauseBuilder,
    MetadataClauseBuilder,
    SearchQueryBuilder,
    stripe_query,
    # Error types
    ErrorCode,
    SearchQueryError,
    QueryValidationError,
    SubstringTooShortError,
    MixedConnectiveError,
)
from .types import FieldClause, LogicalClause, LogicalOperator, QueryClause

__version__ = "0.1.0"

# Library records stay silent until an application calls logger.enable("stripe_search").
logger.disable(__name__)

__all__ = [
    "version",
    "stripe_query",
    "SearchQueryBuilder",
    "FieldClauseBuilder",
    "MetadataClauseBuilder",
    "presets",
    "customer_query",
    "CustomerQueryBuilder",
    "charge_templates",
    "escape_string_value",
    "escape_metadata_key",
    "format_value",
    "FieldClause",
    "LogicalClause",
    "LogicalOperator",
    "QueryClause",
    # Error types
    "ErrorCode",
    "SearchQueryError",
    "QueryValidationError",
    "SubstringTooShortError",
    "MixedConnectiveError",
]


def version() -> str:
    """Return the package version string."""
    return __version__
