"""Registration - the one student route reachable without a bearer token.

Invariants:
    - The caller has no verified identity yet, so uid comes from the body
    - Duplicate uid -> 409, record untouched
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_db
from app.schemas.student import RegisterResponse, StudentRegister
from app.services.student_service import StudentService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["students"])


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_student(
    body: StudentRegister, db: AsyncSession = Depends(get_db),
):
    """Register a new student keyed by the identity subject id."""
    profile = body.model_dump(exclude={"uid"}, exclude_none=True)
    student_id = await StudentService(db).register(body.uid, profile)
    return RegisterResponse(
        message="Student registered successfully", student_id=student_id,
    )
