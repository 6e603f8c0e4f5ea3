"""
Top-level package for the Bookstore API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
