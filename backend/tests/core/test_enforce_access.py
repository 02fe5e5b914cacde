"""Access & Capacity Rules - tests for the pure checks used by services.

Tests cover:
    - check_owner: same subject passes, different subject -> ForbiddenError (message names the resource)
    - check_enrollment_owner: only the enrollment's student may drop it
    - check_course_capacity: blocks at and above capacity, passes below
    - check_not_already_enrolled: only status=enrolled blocks (dropped/none allow re-enroll)
    - check_enrollment_active: only status=enrolled may be dropped
    - available_slots: capacity - enrolled_count, treats missing values as 0, not clamped
"""

from app.core.enforce_access import (
    available_slots,
    check_course_capacity,
    check_enrollment_active,
    check_enrollment_owner,
    check_not_already_enrolled,
    check_owner,
)
from app.core.errors import (
    AlreadyEnrolledError,
    CourseFullError,
    EnrollmentNotActiveError,
    ForbiddenError,
)


# ─── check_owner ─────────────────────────────────────────────────

def test_owner_passes_for_same_subject():
    assert check_owner("subj-1", "subj-1") is None


def test_owner_blocks_other_subject():
    error = check_owner("subj-1", "subj-2", action="update")
    assert isinstance(error, ForbiddenError)
    assert error.http_status == 403
    assert error.message == "Forbidden - Cannot update other student's data"


def test_owner_message_names_resource():
    error = check_owner("a", "b", resource="enrollments")
    assert error.message == "Forbidden - Cannot access other student's enrollments"


def test_owner_is_case_sensitive():
    assert check_owner("Subj-1", "subj-1") is not None


# ─── check_enrollment_owner ──────────────────────────────────────

def test_enrollment_owner_passes_for_owner():
    assert check_enrollment_owner("subj-1", "subj-1") is None


def test_enrollment_owner_blocks_other_student():
    error = check_enrollment_owner("subj-2", "subj-1")
    assert isinstance(error, ForbiddenError)
    assert "drop" in error.message


# ─── check_course_capacity ───────────────────────────────────────

def test_capacity_passes_below_limit():
    assert check_course_capacity("c1", capacity=2, enrolled_count=1) is None


def test_capacity_blocks_at_limit():
    error = check_course_capacity("c1", capacity=2, enrolled_count=2)
    assert isinstance(error, CourseFullError)
    assert error.code == "COURSE_FULL"
    assert error.http_status == 400


def test_capacity_blocks_zero_capacity_course():
    assert check_course_capacity("c1", capacity=0, enrolled_count=0) is not None


# ─── check_not_already_enrolled ──────────────────────────────────

def test_no_existing_enrollment_passes():
    assert check_not_already_enrolled("s_c", None) is None


def test_dropped_enrollment_allows_reenroll():
    assert check_not_already_enrolled("s_c", "dropped") is None


def test_completed_enrollment_allows_reenroll():
    assert check_not_already_enrolled("s_c", "completed") is None


def test_active_enrollment_blocks():
    error = check_not_already_enrolled("s_c", "enrolled")
    assert isinstance(error, AlreadyEnrolledError)
    assert error.http_status == 409


# ─── check_enrollment_active ─────────────────────────────────────

def test_active_enrollment_can_be_dropped():
    assert check_enrollment_active("s_c", "enrolled") is None


def test_dropped_enrollment_cannot_be_dropped_again():
    error = check_enrollment_active("s_c", "dropped")
    assert isinstance(error, EnrollmentNotActiveError)
    assert error.http_status == 404
    assert error.code == "ENROLLMENT_NOT_ACTIVE"


# ─── available_slots ─────────────────────────────────────────────

def test_available_slots_is_capacity_minus_enrolled():
    assert available_slots(50, 12) == 38


def test_available_slots_treats_missing_as_zero():
    assert available_slots(None, None) == 0
    assert available_slots(10, None) == 10


def test_available_slots_is_not_clamped():
    assert available_slots(1, 3) == -2
