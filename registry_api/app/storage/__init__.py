"""
Storage layer.

Services depend on ``MemoryStore`` rather than on a bare dict, so the
collection can only be reached through get/save/add/delete/list.
"""

from .memory import MemoryStore

__all__ = ["MemoryStore"]
