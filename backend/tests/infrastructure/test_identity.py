"""Identity Verifier - JWT validation and subject extraction.

Tests:
    - valid token -> subject from "sub"
    - "uid" / "user_id" fallbacks when "sub" is absent
    - expired, unsigned-by-us, missing-exp, and subject-less tokens -> UnauthorizedError
    - audience checked when configured
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.config import Settings
from app.core.errors import UnauthorizedError
from app.infrastructure.identity import JWTIdentityVerifier, build_identity_verifier

SECRET = "identity-test-secret-0123456789abcdef"


def _token(claims: dict, secret: str = SECRET, expires_in: int | None = 3600) -> str:
    payload = dict(claims)
    if expires_in is not None:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def verifier():
    return JWTIdentityVerifier(SECRET)


def test_valid_token_returns_sub(verifier):
    assert verifier.verify(_token({"sub": "subj-1"})) == "subj-1"


@pytest.mark.parametrize("claim", ["uid", "user_id"])
def test_subject_fallback_claims(verifier, claim):
    assert verifier.verify(_token({claim: "subj-2"})) == "subj-2"


def test_sub_wins_over_fallbacks(verifier):
    assert verifier.verify(_token({"sub": "a", "uid": "b"})) == "a"


def test_expired_token_rejected(verifier):
    with pytest.raises(UnauthorizedError) as exc:
        verifier.verify(_token({"sub": "subj-1"}, expires_in=-60))
    assert exc.value.message == "Unauthorized - Token has expired"


def test_leeway_accepts_recently_expired_token():
    lenient = JWTIdentityVerifier(SECRET, leeway_seconds=120)
    assert lenient.verify(_token({"sub": "subj-1"}, expires_in=-60)) == "subj-1"


def test_wrong_signature_rejected(verifier):
    forged = _token({"sub": "subj-1"}, secret="another-secret-0123456789abcdef!!")
    with pytest.raises(UnauthorizedError) as exc:
        verifier.verify(forged)
    assert exc.value.message == "Unauthorized - Invalid token"


def test_token_without_exp_rejected(verifier):
    with pytest.raises(UnauthorizedError):
        verifier.verify(_token({"sub": "subj-1"}, expires_in=None))


def test_garbage_token_rejected(verifier):
    with pytest.raises(UnauthorizedError):
        verifier.verify("not.a.jwt")


def test_token_without_subject_rejected(verifier):
    with pytest.raises(UnauthorizedError) as exc:
        verifier.verify(_token({"role": "student"}))
    assert exc.value.message == "Unauthorized - Token has no subject"


def test_audience_enforced_when_configured():
    strict = JWTIdentityVerifier(SECRET, audience="enrollment-api")
    assert strict.verify(_token({"sub": "s", "aud": "enrollment-api"})) == "s"
    with pytest.raises(UnauthorizedError):
        strict.verify(_token({"sub": "s", "aud": "billing"}))


def test_build_from_settings_uses_configured_secret():
    verifier = build_identity_verifier(Settings(auth_jwt_secret=SECRET))
    assert verifier.verify(_token({"sub": "subj-9"})) == "subj-9"
