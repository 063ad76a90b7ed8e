"""
Data Models Layer.

This package contains the models that define the core data structures
used throughout the application, such as configuration and statistics.
"""

from .config import SpecifierOverride, VendorConfig
from .manifest import ResolutionFailure, ResolutionResult, ResolvedEntry
from .options import RunOptions
from .stats import VendorStats

__all__ = [
    "ResolutionFailure",
    "ResolutionResult",
    "ResolvedEntry",
    "RunOptions",
    "SpecifierOverride",
    "VendorConfig",
    "VendorStats",
]
