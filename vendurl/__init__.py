"""
vendurl: vendor remote script dependencies into a local directory.
"""

__version__ = "0.3.0"
