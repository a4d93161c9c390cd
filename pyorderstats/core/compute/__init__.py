"""
Shared compute infrastructure for pyorderstats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
"""

from pyorderstats.core.compute.timing import Timer

__all__ = [
    "Timer",
]
