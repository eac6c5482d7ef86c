"""
Account API package.

Contains the account registration route.
"""

from src.api.account.routes import router

__all__ = ["router"]
