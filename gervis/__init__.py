"""
Gervis portfolio metrics: shared modules for the advisor CRM backend.
"""
from .config import settings

__all__ = [
    "settings",
]
