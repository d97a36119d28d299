"""
Auth API package.

Contains the registration, email verification, duplicate check, login
and profile endpoints mounted under /api/auth.
"""

from storifal.api.auth.routes import router

__all__ = ["router"]
