"""
Stock Tracker

A local inventory tracking tool. It records stock items with their
quantities, lets you adjust, rename, delete, filter and sort them, and
persists the list to a local key-value storage file.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("stock-tracker")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
]
