"""Seed Courses - standalone POST /seed-courses guarded by an emptiness check.

Invariants:
    - Empty catalog: inserts exactly len(SAMPLE_COURSES) courses, all with enrolledCount 0
    - Non-empty catalog: 400 SEED_ALREADY_APPLIED and zero writes
    - Non-POST -> 405
    - The seed route is not exposed by the main API app
"""

from sqlalchemy import func, select

from app.core.course_catalog import SAMPLE_COURSES
from app.models.course import Course


async def _course_count(test_db) -> int:
    return await test_db.scalar(select(func.count()).select_from(Course))


async def test_seed_empty_catalog_inserts_all_fixtures(seed_client, test_db):
    res = await seed_client.post("/seed-courses")

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == f"Successfully seeded {len(SAMPLE_COURSES)} courses!"
    assert "CS101: Introduction to Computer Science" in body["courses"]
    assert await _course_count(test_db) == len(SAMPLE_COURSES)

    result = await test_db.execute(select(Course))
    for course in result.scalars():
        assert course.enrolled_count == 0
        assert course.created_at is not None


async def test_seed_non_empty_catalog_is_refused_without_writes(
    seed_client, add_course, test_db,
):
    await add_course("EXISTING1")

    res = await seed_client.post("/seed-courses")

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SEED_ALREADY_APPLIED"
    assert await _course_count(test_db) == 1


async def test_seed_twice_second_is_refused(seed_client, test_db):
    assert (await seed_client.post("/seed-courses")).status_code == 200
    assert (await seed_client.post("/seed-courses")).status_code == 400
    assert await _course_count(test_db) == len(SAMPLE_COURSES)


async def test_seed_rejects_get(seed_client):
    res = await seed_client.get("/seed-courses")
    assert res.status_code == 405


async def test_main_api_does_not_expose_seed(client):
    res = await client.post("/seed-courses")
    assert res.status_code == 404
