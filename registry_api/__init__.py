"""
Top-level package for the registry services.

All functionality lives in submodules under ``app``.
"""

__all__ = []
