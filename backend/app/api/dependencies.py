"""Auth Gate - bearer-token dependency for protected routers.

Invariants:
    - Missing header or missing "Bearer " prefix -> 401 before any handler runs
    - Verified subject id stored on request.state.subject_id and returned
    - The subject id is the ONLY authorization key used downstream
    - Student routes compare the path id with the subject before the body is looked at

Design Decisions:
    - Router-level dependency: FastAPI caches it per request, so handlers that also
      declare it get the same subject without verifying twice
"""

import logging

from fastapi import Depends, Header, Request

from app.core.domain_types import SubjectId
from app.core.enforce_access import check_owner
from app.core.errors import UnauthorizedError
from app.infrastructure.identity import IdentityVerifier, get_identity_verifier

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_current_subject(
    request: Request,
    authorization: str | None = Header(None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> SubjectId:
    """Verify the bearer credential and return the caller's subject id."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Unauthorized - No token provided")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise UnauthorizedError("Unauthorized - No token provided")

    subject_id = verifier.verify(token)
    request.state.subject_id = subject_id
    return subject_id


def require_own_student(
    request: Request,
    student_id: str,
    subject_id: SubjectId = Depends(get_current_subject),
) -> SubjectId:
    """The path student must be the caller. Solved before the body is validated."""
    action = "access" if request.method == "GET" else "update"
    error = check_owner(subject_id, student_id, action=action)
    if error:
        logger.info(
            f"Ownership check failed on {request.url.path}",
            extra={"student_id": subject_id, "path": request.url.path},
        )
        raise error
    return subject_id
