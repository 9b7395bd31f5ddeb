"""Hypothesis strategies for dateglot property-based testing.

Strategies are organized by domain:

- locales: synthetic locale tables, curated CLDR tags, layouts and values

Usage:
    from tests.strategies import synthetic_locales, localized_samples
"""

from .locales import (
    CLDR_LOCALE_POOL,
    LAYOUT_TEMPLATES,
    LocalizedSample,
    build_sample,
    is_unambiguous,
    localized_samples,
    name_tables,
    synthetic_locales,
    whitespace_runs,
)

__all__ = [
    "CLDR_LOCALE_POOL",
    "LAYOUT_TEMPLATES",
    "LocalizedSample",
    "build_sample",
    "is_unambiguous",
    "localized_samples",
    "name_tables",
    "synthetic_locales",
    "whitespace_runs",
]
