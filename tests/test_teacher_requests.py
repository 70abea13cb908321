"""Teacher promotion workflow."""
import pytest

from learnhub.core.errors import Conflict, NotFound
from learnhub.schemas.teacher_request import TeacherRequestCreate
from learnhub.services import teacher_request_service, user_service

from tests.conftest import ADMIN_EMAIL, STUDENT_EMAIL


def request_payload(**overrides) -> dict:
    payload = {
        "name": "Sam Student",
        "email": STUDENT_EMAIL,
        "image": "https://img.learnhub.io/sam.png",
        "title": "Intro to Pottery",
        "experience": "beginner",
        "category": "Art",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def pending_request(db_session, student_user):
    return teacher_request_service.submit_request(
        db_session, obj_in=TeacherRequestCreate(**request_payload())
    )


class TestSubmit:
    def test_submit_creates_pending(self, client, auth_headers, student_user):
        resp = client.post(
            "/api/v1/teacher-requests", json=request_payload(), headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "pending"
        assert body["email"] == STUDENT_EMAIL
        assert "createdAt" in body

    def test_missing_field_is_invalid_input(self, client, auth_headers, student_user):
        payload = request_payload()
        del payload["category"]
        resp = client.post(
            "/api/v1/teacher-requests", json=payload, headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "InvalidInput"
        assert "category" in resp.json()["detail"]

    def test_blank_field_is_invalid_input(self, client, auth_headers, student_user):
        resp = client.post(
            "/api/v1/teacher-requests",
            json=request_payload(title="   "),
            headers=auth_headers(STUDENT_EMAIL),
        )
        assert resp.status_code == 400

    def test_submit_for_someone_else_is_forbidden(self, client, auth_headers, student_user):
        resp = client.post(
            "/api/v1/teacher-requests",
            json=request_payload(email="other@learnhub.io"),
            headers=auth_headers(STUDENT_EMAIL),
        )
        assert resp.status_code == 403

    def test_second_submit_while_pending_conflicts(self, client, auth_headers, pending_request):
        resp = client.post(
            "/api/v1/teacher-requests", json=request_payload(), headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.status_code == 409
        assert resp.json()["error"] == "Conflict"

    @pytest.mark.parametrize("resolve", ["approve_request", "reject_request"])
    def test_second_submit_after_resolution_conflicts(self, db_session, pending_request, resolve):
        getattr(teacher_request_service, resolve)(db_session, pending_request.id)
        with pytest.raises(Conflict):
            teacher_request_service.submit_request(
                db_session, obj_in=TeacherRequestCreate(**request_payload())
            )

    def test_resubmit_after_rejection_when_allowed(self, db_session, pending_request):
        teacher_request_service.reject_request(db_session, pending_request.id)
        again = teacher_request_service.submit_request(
            db_session,
            obj_in=TeacherRequestCreate(**request_payload(title="Advanced Pottery")),
            allow_resubmit=True,
        )
        assert again.id == pending_request.id
        assert again.status == "pending"
        assert again.title == "Advanced Pottery"

    def test_resubmit_after_acceptance_still_conflicts(self, db_session, pending_request):
        teacher_request_service.approve_request(db_session, pending_request.id)
        with pytest.raises(Conflict):
            teacher_request_service.submit_request(
                db_session,
                obj_in=TeacherRequestCreate(**request_payload()),
                allow_resubmit=True,
            )


class TestStatus:
    def test_own_status(self, client, auth_headers, pending_request):
        resp = client.get(
            f"/api/v1/teacher-requests/{STUDENT_EMAIL}", headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "pending"

    def test_no_request_is_404(self, client, auth_headers, student_user):
        resp = client.get(
            f"/api/v1/teacher-requests/{STUDENT_EMAIL}", headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.status_code == 404

    def test_admin_may_read_any_status(self, client, auth_headers, admin_user, pending_request):
        resp = client.get(
            f"/api/v1/teacher-requests/{STUDENT_EMAIL}", headers=auth_headers(ADMIN_EMAIL)
        )
        assert resp.status_code == 200

    def test_other_user_may_not_read_status(self, client, auth_headers, pending_request):
        resp = client.get(
            f"/api/v1/teacher-requests/{STUDENT_EMAIL}", headers=auth_headers("nosy@learnhub.io")
        )
        assert resp.status_code == 403

    def test_list_is_admin_only(self, client, auth_headers, admin_user, pending_request):
        assert client.get(
            "/api/v1/teacher-requests", headers=auth_headers(STUDENT_EMAIL)
        ).status_code == 403
        resp = client.get("/api/v1/teacher-requests", headers=auth_headers(ADMIN_EMAIL))
        assert resp.status_code == 200
        assert [r["id"] for r in resp.json()] == [pending_request.id]


class TestResolve:
    def test_approve_promotes_user(self, client, auth_headers, db_session, admin_user, pending_request):
        resp = client.patch(
            f"/api/v1/teacher-requests/{pending_request.id}/approve",
            headers=auth_headers(ADMIN_EMAIL),
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "accepted"

        db_session.expire_all()
        assert teacher_request_service.get_status(db_session, STUDENT_EMAIL).status == "accepted"
        assert user_service.get_user_by_email(db_session, STUDENT_EMAIL).role == "teacher"

    def test_approve_requires_admin(self, client, auth_headers, pending_request):
        resp = client.patch(
            f"/api/v1/teacher-requests/{pending_request.id}/approve",
            headers=auth_headers(STUDENT_EMAIL),
        )
        assert resp.status_code == 403

    def test_approve_unknown_is_404(self, client, auth_headers, admin_user):
        resp = client.patch(
            "/api/v1/teacher-requests/424242/approve", headers=auth_headers(ADMIN_EMAIL)
        )
        assert resp.status_code == 404

    def test_approve_twice_is_404(self, db_session, pending_request):
        teacher_request_service.approve_request(db_session, pending_request.id)
        with pytest.raises(NotFound):
            teacher_request_service.approve_request(db_session, pending_request.id)

    def test_approve_after_reject_conflicts(self, db_session, pending_request):
        teacher_request_service.reject_request(db_session, pending_request.id)
        with pytest.raises(Conflict):
            teacher_request_service.approve_request(db_session, pending_request.id)

    def test_approve_without_registered_user_changes_nothing(self, db_session):
        request = teacher_request_service.submit_request(
            db_session, obj_in=TeacherRequestCreate(**request_payload(email="unreg@learnhub.io"))
        )
        with pytest.raises(NotFound):
            teacher_request_service.approve_request(db_session, request.id)

        db_session.expire_all()
        assert teacher_request_service.get_status(db_session, "unreg@learnhub.io").status == "pending"

    def test_reject_leaves_role_alone(self, client, auth_headers, db_session, admin_user, pending_request):
        resp = client.patch(
            f"/api/v1/teacher-requests/{pending_request.id}/reject",
            headers=auth_headers(ADMIN_EMAIL),
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "rejected"

        db_session.expire_all()
        assert user_service.get_user_by_email(db_session, STUDENT_EMAIL).role == "normal"


class TestEmailCase:
    def test_mixed_case_request_is_approvable(self, client, auth_headers, db_session, admin_user, student_user):
        resp = client.post(
            "/api/v1/teacher-requests",
            json=request_payload(email="Student@LearnHub.io"),
            headers=auth_headers(STUDENT_EMAIL),
        )
        assert resp.status_code == 201
        assert resp.json()["email"] == STUDENT_EMAIL

        resp = client.patch(
            f"/api/v1/teacher-requests/{resp.json()['id']}/approve",
            headers=auth_headers(ADMIN_EMAIL),
        )
        assert resp.status_code == 200

        db_session.expire_all()
        assert user_service.get_user_by_email(db_session, STUDENT_EMAIL).role == "teacher"
        resp = client.get(
            "/api/v1/teacher-requests/STUDENT@learnhub.io", headers=auth_headers(STUDENT_EMAIL)
        )
        assert resp.json()["status"] == "accepted"

    def test_mixed_case_duplicate_conflicts(self, client, auth_headers, pending_request):
        resp = client.post(
            "/api/v1/teacher-requests",
            json=request_payload(email="STUDENT@learnhub.io"),
            headers=auth_headers(STUDENT_EMAIL),
        )
        assert resp.status_code == 409


class TestAdminRequester:
    def test_approving_an_admins_request_keeps_admin(self, db_session, admin_user):
        request = teacher_request_service.submit_request(
            db_session, obj_in=TeacherRequestCreate(**request_payload(email=ADMIN_EMAIL))
        )
        resolved = teacher_request_service.approve_request(db_session, request.id)

        assert resolved.status == "accepted"
        db_session.expire_all()
        assert user_service.get_user_by_email(db_session, ADMIN_EMAIL).role == "admin"
