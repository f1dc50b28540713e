"""
FastAPI Routes.

API routes (JSON) + page routes (static site).
"""

from . import contact, health, pages

__all__ = ["contact", "health", "pages"]
