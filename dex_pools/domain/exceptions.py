from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class PoolQueryInputError(DomainError):
    """Invalid filter or pagination parameters for the pool query."""


class DexConfigError(DomainError):
    """Required upstream configuration is missing."""


class UpstreamFetchError(DomainError):
    """The aggregated DEX data could not be obtained."""
