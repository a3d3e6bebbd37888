"""
Service layer for business logic.
"""
from myflix.services.access_service import AccessService
from myflix.services.identity import IdentityVerifier

__all__ = [
    "AccessService",
    "IdentityVerifier",
]
