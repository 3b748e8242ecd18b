"""
API routes package for the config comparator.
"""
from api.routes import comparison

__all__ = ["comparison"]
