import uuid

import pytest

from app.models import Applicant, ApplicantStatus


URL = "/api/v1/applicants"


@pytest.fixture
def position(make_position, company, admin):
    return make_position(company, admin)


@pytest.fixture
def foreign_applicant(make_position, make_applicant, second_company):
    return make_applicant(make_position(second_company), email="foreign@example.com")


def application(position_id, **overrides):
    body = {
        "positionId": position_id,
        "fullName": "John Doe",
        "email": "john@example.com",
        "phone": "1234567890",
        "education": "BSc Informatics",
        "experience": 4,
        "resumeUrl": "https://example.com/john.pdf",
    }
    body.update(overrides)
    return body


class TestApply:
    def test_public_application_is_stored(self, client, db, position):
        response = client.post(URL, json=application(position.id))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["positionId"] == position.id
        assert data["status"] == "PENDING"
        stored = db.query(Applicant).filter(Applicant.id == data["id"]).one()
        assert stored.position_id == position.id
        assert stored.status is ApplicantStatus.PENDING

    def test_status_and_notes_cannot_be_preset(self, client, position):
        body = application(position.id, status="HIRED", notes="friend of the CEO")

        data = client.post(URL, json=body).json()["data"]

        assert data["status"] == "PENDING"
        assert data["notes"] is None

    def test_unknown_position(self, client):
        response = client.post(URL, json=application(str(uuid.uuid4())))

        assert response.status_code == 404
        assert response.json()["message"] == "Position not found"

    def test_validation(self, client, position):
        body = application("not-a-uuid", email="bad", experience="lots", resumeUrl="resume.pdf")

        response = client.post(URL, json=body)

        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"positionId", "email", "experience", "resumeUrl"} <= fields


class TestReadApplicants:
    def test_requires_authentication(self, client):
        assert client.get(URL).status_code == 401

    def test_list_is_scoped_and_includes_position_title(
        self, client, hr, position, make_applicant, foreign_applicant, auth_headers
    ):
        own = make_applicant(position)

        response = client.get(URL, headers=auth_headers(hr))

        data = response.json()["data"]
        assert [a["id"] for a in data] == [own.id]
        assert data[0]["position"]["title"] == "Backend Engineer"

    def test_list_filtered_by_position(
        self, client, admin, company, position, make_position, make_applicant, auth_headers
    ):
        wanted = make_applicant(position)
        make_applicant(make_position(company, title="Other"), email="x@example.com")

        response = client.get(URL, params={"positionId": position.id}, headers=auth_headers(admin))

        assert [a["id"] for a in response.json()["data"]] == [wanted.id]

    def test_get_foreign_is_404(self, client, admin, foreign_applicant, auth_headers):
        response = client.get(f"{URL}/{foreign_applicant.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Applicant not found"}


class TestMutateApplicants:
    def test_update_status(self, client, db, recruiter, position, make_applicant, auth_headers):
        applicant = make_applicant(position)

        response = client.patch(
            f"{URL}/{applicant.id}/status",
            json={"status": "INTERVIEW"},
            headers=auth_headers(recruiter),
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Status updated"}
        status = db.query(Applicant.status).filter(Applicant.id == applicant.id).scalar()
        assert status is ApplicantStatus.INTERVIEW

    def test_applied_is_not_a_status(self, client, admin, position, make_applicant, auth_headers):
        applicant = make_applicant(position)

        response = client.patch(
            f"{URL}/{applicant.id}/status",
            json={"status": "APPLIED"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 422

    def test_update_foreign_status_is_404(self, client, db, admin, foreign_applicant, auth_headers):
        response = client.patch(
            f"{URL}/{foreign_applicant.id}/status",
            json={"status": "HIRED"},
            headers=auth_headers(admin),
        )

        assert response.status_code == 404
        status = db.query(Applicant.status).filter(Applicant.id == foreign_applicant.id).scalar()
        assert status is ApplicantStatus.PENDING

    def test_update_notes(self, client, db, hr, position, make_applicant, auth_headers):
        applicant = make_applicant(position)

        response = client.patch(
            f"{URL}/{applicant.id}/notes",
            json={"notes": "Strong SQL"},
            headers=auth_headers(hr),
        )

        assert response.status_code == 200
        assert db.query(Applicant.notes).filter(Applicant.id == applicant.id).scalar() == "Strong SQL"

    def test_empty_notes_rejected(self, client, admin, position, make_applicant, auth_headers):
        applicant = make_applicant(position)

        response = client.patch(f"{URL}/{applicant.id}/notes", json={"notes": ""}, headers=auth_headers(admin))

        assert response.status_code == 422

    def test_delete_own(self, client, db, admin, position, make_applicant, auth_headers):
        applicant = make_applicant(position)
        applicant_id = applicant.id

        response = client.delete(f"{URL}/{applicant_id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert db.query(Applicant).filter(Applicant.id == applicant_id).count() == 0

    def test_delete_foreign_is_404(self, client, db, admin, foreign_applicant, auth_headers):
        response = client.delete(f"{URL}/{foreign_applicant.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert db.query(Applicant).filter(Applicant.id == foreign_applicant.id).count() == 1
