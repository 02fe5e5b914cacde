"""Identity Verifier - validates bearer credentials and yields the stable subject id.

Invariants:
    - verify() returns a non-empty SubjectId or raises UnauthorizedError, never anything else
    - Tokens must carry exp; expired tokens are rejected (leeway configurable)
    - Token issuance is out of scope: tokens come from the external identity service

Design Decisions:
    - Protocol for the verifier: routes depend on the contract, tests inject their own instance
    - PyJWT for signature/claim checks (same library as the gateway's shared JWT helper)
    - Subject taken from "sub", then "uid"/"user_id" for identity services that emit those
"""

import logging
from typing import Protocol

import jwt
from fastapi import Request

from app.config import Settings
from app.core.domain_types import SubjectId
from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

SUBJECT_CLAIMS = ("sub", "uid", "user_id")


class IdentityVerifier(Protocol):
    """Contract for bearer-token verification - implemented by infrastructure."""
    def verify(self, token: str) -> SubjectId: ...


class JWTIdentityVerifier:
    """Verifies signed JWTs against a configured key."""

    def __init__(
        self,
        secret: str,
        algorithms: list[str] | None = None,
        audience: str | None = None,
        issuer: str | None = None,
        leeway_seconds: int = 0,
    ):
        self._secret = secret
        self._algorithms = algorithms or ["HS256"]
        self._audience = audience
        self._issuer = issuer
        self._leeway = leeway_seconds

    def verify(self, token: str) -> SubjectId:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                leeway=self._leeway,
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Token verification failed: token expired")
            raise UnauthorizedError("Unauthorized - Token has expired")
        except jwt.InvalidTokenError as e:
            logger.info(f"Token verification failed: {e}")
            raise UnauthorizedError("Unauthorized - Invalid token")

        for claim in SUBJECT_CLAIMS:
            subject = claims.get(claim)
            if isinstance(subject, str) and subject:
                return SubjectId(subject)
        raise UnauthorizedError("Unauthorized - Token has no subject")


def build_identity_verifier(settings: Settings) -> JWTIdentityVerifier:
    return JWTIdentityVerifier(
        secret=settings.auth_jwt_secret,
        algorithms=settings.auth_jwt_algorithms,
        audience=settings.auth_jwt_audience,
        issuer=settings.auth_jwt_issuer,
        leeway_seconds=settings.auth_jwt_leeway_seconds,
    )


def get_identity_verifier(request: Request) -> IdentityVerifier:
    """FastAPI dependency - the verifier built in the lifespan."""
    verifier = getattr(request.app.state, "identity_verifier", None)
    if verifier is None:
        raise RuntimeError("Identity verifier not initialized")
    return verifier
