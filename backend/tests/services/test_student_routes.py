"""Student Routes - own-profile read/update behind the auth gate.

Invariants:
    - Path id != verified subject -> 403 regardless of payload, even an invalid one (nothing written)
    - name may be omitted on PUT but null is rejected with 400
    - Unknown student -> 404
    - PUT ignores email, applies only provided fields, refreshes updatedAt
"""

from app.models.student import Student


async def test_get_own_student_returns_record(client, add_student, auth_headers):
    await add_student("subj-1", program="Physics", ic_number="enc:abc")

    res = await client.get("/students/subj-1", headers=auth_headers("subj-1"))

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == "subj-1"
    assert body["program"] == "Physics"
    assert body["icNumber"] == "enc:abc"
    assert "createdAt" in body and "updatedAt" in body


async def test_get_other_student_is_forbidden(client, add_student, auth_headers):
    await add_student("subj-1")
    await add_student("subj-2")

    res = await client.get("/students/subj-2", headers=auth_headers("subj-1"))

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


async def test_get_unregistered_self_returns_404(client, auth_headers):
    res = await client.get("/students/unregistered", headers=auth_headers("unregistered"))
    assert res.status_code == 404


async def test_update_own_student_merges_fields(client, add_student, auth_headers, reload):
    await add_student("subj-1", program="Physics", phone_number="enc:1")

    res = await client.put(
        "/students/subj-1",
        json={"program": "Mathematics", "address": "enc:addr"},
        headers=auth_headers("subj-1"),
    )

    assert res.status_code == 200
    assert res.json() == {"message": "Student updated successfully"}
    student = await reload(Student, "subj-1")
    assert student.program == "Mathematics"
    assert student.address == "enc:addr"
    assert student.phone_number == "enc:1"


async def test_update_never_changes_email(client, add_student, auth_headers, reload):
    await add_student("subj-1", email="ana@uni.edu")

    res = await client.put(
        "/students/subj-1",
        json={"email": "hijack@evil.com", "name": "Ana Updated"},
        headers=auth_headers("subj-1"),
    )

    assert res.status_code == 200
    student = await reload(Student, "subj-1")
    assert student.email == "ana@uni.edu"
    assert student.name == "Ana Updated"


async def test_update_other_student_is_forbidden_and_writes_nothing(
    client, add_student, auth_headers, reload,
):
    await add_student("subj-2", program="Physics")

    res = await client.put(
        "/students/subj-2", json={"program": "Hacked"},
        headers=auth_headers("subj-1"),
    )

    assert res.status_code == 403
    assert (await reload(Student, "subj-2")).program == "Physics"


async def test_update_unregistered_self_returns_404(client, auth_headers):
    res = await client.put(
        "/students/unregistered", json={"program": "X"}, headers=auth_headers("unregistered"),
    )
    assert res.status_code == 404


async def test_update_other_student_with_invalid_body_is_forbidden(
    client, add_student, auth_headers, reload,
):
    await add_student("subj-2", enrollment_year=2024)

    res = await client.put(
        "/students/subj-2", json={"enrollmentYear": "not-a-year"},
        headers=auth_headers("subj-1"),
    )

    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"
    assert (await reload(Student, "subj-2")).enrollment_year == 2024


async def test_update_with_null_name_returns_400_and_keeps_name(
    client, add_student, auth_headers, reload,
):
    await add_student("subj-1", name="Ana")

    res = await client.put(
        "/students/subj-1", json={"name": None}, headers=auth_headers("subj-1"),
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (await reload(Student, "subj-1")).name == "Ana"
