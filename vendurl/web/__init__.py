"""
HTTP Layer.

This package contains the fetcher that downloads vendored files from
their resolved URLs.
"""

from .fetcher import FINAL_PATH_HEADER, Fetcher

__all__ = ["FINAL_PATH_HEADER", "Fetcher"]
