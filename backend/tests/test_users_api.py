from app.models import Role, User


URL = "/api/v1/users"
NEW_USER = {
    "fullName": "Rita Recruiter",
    "email": "rita@acme.test",
    "password": "secret123",
    "role": "RECRUITER",
}


class TestCreateUser:
    def test_admin_creates_user_in_own_company(self, client, db, admin, auth_headers):
        response = client.post(URL, json=NEW_USER, headers=auth_headers(admin))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["companyId"] == admin.company_id
        assert data["role"] == "RECRUITER"
        assert "password" not in data
        assert db.query(User).filter(User.email == "rita@acme.test").one().company_id == admin.company_id

    def test_company_in_payload_is_ignored(self, client, db, admin, second_company, auth_headers):
        body = dict(NEW_USER, companyId=second_company.id)

        response = client.post(URL, json=body, headers=auth_headers(admin))

        assert response.status_code == 201
        assert response.json()["data"]["companyId"] == admin.company_id

    def test_duplicate_email_across_companies(self, client, admin, other_admin, auth_headers):
        response = client.post(URL, json=dict(NEW_USER, email=other_admin.email), headers=auth_headers(admin))

        assert response.status_code == 422
        assert response.json()["errors"][0]["msg"] == "Email already exists"

    def test_unknown_role_rejected(self, client, admin, auth_headers):
        response = client.post(URL, json=dict(NEW_USER, role="OWNER"), headers=auth_headers(admin))

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "role"

    def test_non_admin_forbidden(self, client, recruiter, auth_headers):
        response = client.post(URL, json=NEW_USER, headers=auth_headers(recruiter))

        assert response.status_code == 403


class TestReadUsers:
    def test_list_is_scoped(self, client, admin, recruiter, other_admin, auth_headers):
        response = client.get(URL, headers=auth_headers(admin))

        assert response.status_code == 200
        ids = {user["id"] for user in response.json()["data"]}
        assert ids == {admin.id, recruiter.id}
        assert all("password" not in user for user in response.json()["data"])

    def test_get_own_user(self, client, admin, recruiter, auth_headers):
        response = client.get(f"{URL}/{recruiter.id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["data"]["email"] == recruiter.email

    def test_get_foreign_user_is_404(self, client, admin, other_admin, auth_headers):
        response = client.get(f"{URL}/{other_admin.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}


class TestDeleteUser:
    def test_delete_own_user(self, client, db, admin, recruiter, auth_headers):
        recruiter_id = recruiter.id

        response = client.delete(f"{URL}/{recruiter_id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully"
        assert db.query(User).filter(User.id == recruiter_id).count() == 0

    def test_delete_foreign_user_is_404(self, client, db, admin, other_admin, auth_headers):
        response = client.delete(f"{URL}/{other_admin.id}", headers=auth_headers(admin))

        assert response.status_code == 404
        assert db.query(User).filter(User.id == other_admin.id).count() == 1
