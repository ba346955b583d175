"""회사 API 테스트"""
import asyncpg

from utils.auth import create_access_token


class TestCreateCompany:
    """POST /companies 테스트"""
    new_company = {
        "handle": "new",
        "name": "New",
        "description": "DescNew",
        "numEmployees": 10,
        "logoUrl": "http://new.img",
    }

    def test_create_company_admin(self, client, conn, admin_headers):
        conn.fetchrow.return_value = {
            "handle": "new",
            "name": "New",
            "description": "DescNew",
            "num_employees": 10,
            "logo_url": "http://new.img",
        }

        response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": self.new_company}
        # camelCase 요청 -> snake_case 컬럼 순서로 전달
        assert conn.fetchrow.call_args.args[1:] == ("new", "New", "DescNew", 10, "http://new.img")

    def test_create_company_non_admin(self, client, user_headers):
        response = client.post("/companies", json=self.new_company, headers=user_headers)
        assert response.status_code == 403

    def test_create_company_anon(self, client):
        response = client.post("/companies", json=self.new_company)
        assert response.status_code == 401

    def test_create_company_invalid_token(self, client):
        headers = {"Authorization": "Bearer invalid_token"}
        response = client.post("/companies", json=self.new_company, headers=headers)
        assert response.status_code == 401

    def test_create_company_malformed_claims(self, client, conn):
        """서명은 유효하지만 claim 타입이 잘못된 토큰은 401"""
        token = create_access_token(data={"username": "admin", "isAdmin": "maybe"})

        response = client.post(
            "/companies", json=self.new_company, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "invalid token"
        conn.fetchrow.assert_not_called()

    def test_create_company_missing_data(self, client, admin_headers):
        response = client.post("/companies", json={"handle": "new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_company_duplicate(self, client, conn, admin_headers):
        conn.fetchval.return_value = "new"

        response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company: new"


class TestGetCompanies:
    """GET /companies 테스트"""

    def test_get_companies(self, client, conn, company_row):
        conn.fetch.return_value = [company_row]

        response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {
            "companies": [{
                "handle": "c1",
                "name": "C1",
                "description": "Desc1",
                "numEmployees": 1,
                "logoUrl": "http://c1.img",
            }]
        }

    def test_get_companies_with_filters(self, client, conn):
        response = client.get("/companies?name=c&minEmployees=1&maxEmployees=2")

        assert response.status_code == 200
        _, *params = conn.fetch.call_args.args
        assert params == ["%c%", 1, 2]

    def test_get_companies_invalid_range(self, client, conn):
        response = client.get("/companies?minEmployees=5&maxEmployees=1")

        assert response.status_code == 400
        conn.fetch.assert_not_called()

    def test_get_companies_unknown_filter(self, client):
        response = client.get("/companies?foo=bar")
        assert response.status_code == 400

    def test_get_companies_empty(self, client):
        response = client.get("/companies?name=nope")

        assert response.status_code == 200
        assert response.json() == {"companies": []}


class TestGetCompany:
    """GET /companies/{handle} 테스트"""

    def test_get_company_with_jobs(self, client, conn, company_row, job_row):
        conn.fetchrow.return_value = company_row
        conn.fetch.return_value = [{k: job_row[k] for k in ("id", "title", "salary", "equity")}]

        response = client.get("/companies/c1")

        assert response.status_code == 200
        company = response.json()["company"]
        assert company["handle"] == "c1"
        assert company["jobs"] == [{"id": 1, "title": "j1", "salary": 10000, "equity": "0.3"}]

    def test_get_company_not_found(self, client):
        response = client.get("/companies/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "No company: nope"


class TestUpdateCompany:
    """PATCH /companies/{handle} 테스트"""

    def test_update_company(self, client, conn, admin_headers, company_row):
        conn.fetchrow.return_value = {**company_row, "name": "C1-new", "logo_url": None}

        response = client.patch(
            "/companies/c1", json={"name": "C1-new", "logoUrl": None}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["company"]["name"] == "C1-new"
        assert response.json()["company"]["logoUrl"] is None
        query, *params = conn.fetchrow.call_args.args
        assert 'SET "name"=$1, "logo_url"=$2' in query
        assert params == ["C1-new", None, "c1"]

    def test_update_company_empty_body(self, client, conn, admin_headers):
        response = client.patch("/companies/c1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data"
        conn.fetchrow.assert_not_called()

    def test_update_company_null_name(self, client, conn, admin_headers):
        """NOT NULL 컬럼에 null 전송 시 400"""
        response = client.patch("/companies/c1", json={"name": None}, headers=admin_headers)

        assert response.status_code == 400
        conn.fetchrow.assert_not_called()

    def test_update_company_null_description(self, client, conn, admin_headers):
        response = client.patch(
            "/companies/c1", json={"numEmployees": 3, "description": None}, headers=admin_headers
        )

        assert response.status_code == 400
        conn.fetchrow.assert_not_called()

    def test_update_company_duplicate_name(self, client, conn, admin_headers):
        conn.fetchrow.side_effect = asyncpg.UniqueViolationError("duplicate key")

        response = client.patch("/companies/c1", json={"name": "C2"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company name: C2"

    def test_update_company_handle_not_allowed(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_company_not_found(self, client, admin_headers):
        response = client.patch("/companies/nope", json={"name": "new"}, headers=admin_headers)
        assert response.status_code == 404

    def test_update_company_non_admin(self, client, user_headers):
        response = client.patch("/companies/c1", json={"name": "new"}, headers=user_headers)
        assert response.status_code == 403


class TestDeleteCompany:
    """DELETE /companies/{handle} 테스트"""

    def test_delete_company(self, client, conn, admin_headers):
        conn.fetchval.return_value = "c1"

        response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}

    def test_delete_company_not_found(self, client, admin_headers):
        response = client.delete("/companies/nope", headers=admin_headers)
        assert response.status_code == 404

    def test_delete_company_anon(self, client, conn):
        response = client.delete("/companies/c1")

        assert response.status_code == 401
        conn.fetchval.assert_not_called()
