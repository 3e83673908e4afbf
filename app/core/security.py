"""Bearer-credential verification and caller resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, Header
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import InvalidCredential, Unauthenticated
from app.db.session import get_db
from app.models.profile import Profile
from app.services.profile_service import load_profile

logger = logging.getLogger(__name__)

BEARER_PREFIX: str = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Verified caller identity; lives only for one request."""

    subject_id: str
    email: str | None = None


def extract_bearer_token(authorization: str | None) -> str:
    """Return the credential from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthenticated()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise Unauthenticated()
    return token


class IdentityVerifier:
    """Validates signed ID tokens issued by the identity provider."""

    def __init__(
        self,
        key: str,
        algorithms: list[str],
        audience: str | None = None,
        issuer: str | None = None,
    ) -> None:
        self.key = key
        self.algorithms = algorithms
        self.audience = audience
        self.issuer = issuer

    def verify(self, token: str) -> Identity:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self.key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as exc:
            logger.info("Token verification failed: %s", exc)
            raise InvalidCredential() from exc

        subject = payload.get("sub") or payload.get("uid")
        if not subject or not isinstance(subject, str):
            raise InvalidCredential()
        email = payload.get("email")
        return Identity(subject_id=subject, email=email if isinstance(email, str) else None)


def get_identity_verifier() -> IdentityVerifier:
    return IdentityVerifier(
        key=settings.identity_jwt_key,
        algorithms=settings.identity_jwt_algorithms,
        audience=settings.identity_audience,
        issuer=settings.identity_issuer,
    )


def get_identity(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Identity:
    """Resolve the verified identity from the Authorization header."""
    return verifier.verify(extract_bearer_token(authorization))


def get_current_profile(
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> Profile:
    """Load the caller's profile fresh for this request."""
    return load_profile(db=db, subject_id=identity.subject_id)
