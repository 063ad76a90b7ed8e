"""
Storage Layer.

This package handles reading the project manifest and writing vendored
files to disk.
"""

from .config_manager import ConfigManager
from .writer import VendorWriter

__all__ = ["ConfigManager", "VendorWriter"]
