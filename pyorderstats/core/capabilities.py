"""
Capability string constants for pyorderstats.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pyorderstats.core.capabilities import (
        CAPABILITY_CONTIGUOUS,
        CAPABILITY_SORTED_ASCENDING,
    )

    if seq.supports(CAPABILITY_CONTIGUOUS) and not seq.supports(CAPABILITY_SORTED_ASCENDING):
        buffer = seq.contiguous_nonnull_buffer()
"""

# Values live in a single C-contiguous numpy buffer
CAPABILITY_CONTIGUOUS = 'contiguous'

# No slot is null
CAPABILITY_NULL_FREE = 'null_free'

# Sequence is flagged as sorted ascending (nulls first)
CAPABILITY_SORTED_ASCENDING = 'sorted_ascending'

# Element type has a numeric order, so quantile/median are defined
CAPABILITY_QUANTILE = 'quantile'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_CONTIGUOUS,
    CAPABILITY_NULL_FREE,
    CAPABILITY_SORTED_ASCENDING,
    CAPABILITY_QUANTILE,
})

__all__ = [
    'CAPABILITY_CONTIGUOUS',
    'CAPABILITY_NULL_FREE',
    'CAPABILITY_SORTED_ASCENDING',
    'CAPABILITY_QUANTILE',
    'ALL_CAPABILITIES',
]
