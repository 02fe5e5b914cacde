"""Course Routes - catalog reads for any authenticated caller."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_subject
from app.infrastructure.database import get_db
from app.schemas.course import CourseListResponse, CourseResponse
from app.services.course_service import CourseService

router = APIRouter(
    prefix="/courses", tags=["courses"],
    dependencies=[Depends(get_current_subject)],
)


@router.get("", response_model=CourseListResponse)
async def list_courses(db: AsyncSession = Depends(get_db)):
    """List all courses with availableSlots."""
    return CourseListResponse(courses=await CourseService(db).list_all())


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, db: AsyncSession = Depends(get_db)):
    return await CourseService(db).get_by_id(course_id)
