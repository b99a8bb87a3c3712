"""
API routes for the BFF
"""

from . import health, auth, users, patients, appointments

__all__ = ["health", "auth", "users", "patients", "appointments"]
