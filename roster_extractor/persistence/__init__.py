"""
Data persistence layer.
"""

from .json_store import JSONStore

__all__ = [
    "JSONStore",
]
