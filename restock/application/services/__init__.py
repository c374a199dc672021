"""
서비스

Usage:
    from restock.application.services import RestockEngine
"""

from restock.application.services.restock_engine import RestockEngine  # noqa: F401
