"""
API client wrappers for backend procedures.
"""

from .base import APIClient

__all__ = ["APIClient"]
