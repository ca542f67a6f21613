"""
Tests for employer and job seeker profiles.
"""

MISSING_ID = "00000000-0000-0000-0000-000000000000"


class TestEmployers:
    def test_create_includes_user_details(self, employer):
        profile = employer["profile"]
        assert profile["userId"] == employer["userId"]
        assert profile["companyName"] == "Acme Corp"
        assert profile["userFullName"] == "Erin Employer"
        assert profile["userEmail"] == employer["email"]

    def test_one_profile_per_user(self, client, employer):
        resp = client.post("/api/Employer", headers=employer["headers"], json={
            "userId": employer["userId"], "companyName": "Second Co",
        })
        assert resp.status_code == 409

    def test_create_for_unknown_user(self, client, make_user):
        user = make_user("Employer")
        resp = client.post("/api/Employer", headers=user["headers"], json={
            "userId": MISSING_ID, "companyName": "Ghost Co",
        })
        assert resp.status_code == 404

    def test_job_seeker_cannot_create(self, client, make_user):
        user = make_user("JobSeeker")
        resp = client.post("/api/Employer", headers=user["headers"], json={
            "userId": user["userId"], "companyName": "Nope",
        })
        assert resp.status_code == 403

    def test_public_company_search(self, client, make_employer):
        make_employer("Globex Corporation")
        make_employer("Initech")
        resp = client.get("/api/Employer/search", params={"company": "globex"})
        assert resp.status_code == 200
        assert [e["companyName"] for e in resp.json()] == ["Globex Corporation"]

    def test_by_user(self, client, employer):
        resp = client.get(f"/api/Employer/by-user/{employer['userId']}", headers=employer["headers"])
        assert resp.status_code == 200
        assert resp.json()["employerId"] == employer["profile"]["employerId"]

    def test_by_user_without_profile(self, client, make_user):
        user = make_user("Employer")
        resp = client.get(f"/api/Employer/by-user/{user['userId']}", headers=user["headers"])
        assert resp.status_code == 404

    def test_by_job(self, client, employer, job):
        resp = client.get(f"/api/Employer/by-job/{job['jobId']}")
        assert resp.status_code == 200
        assert resp.json()["companyName"] == "Acme Corp"

    def test_get_and_list_are_admin_only(self, client, admin, employer):
        employer_id = employer["profile"]["employerId"]
        assert client.get(f"/api/Employer/{employer_id}", headers=employer["headers"]).status_code == 403
        assert client.get(f"/api/Employer/{employer_id}", headers=admin["headers"]).status_code == 200
        assert len(client.get("/api/Employer", headers=admin["headers"]).json()) == 1

    def test_update(self, client, employer):
        employer_id = employer["profile"]["employerId"]
        resp = client.put(f"/api/Employer/{employer_id}", headers=employer["headers"], json={
            "position": "CTO", "contactInfo": "+1 555 0100",
        })
        assert resp.status_code == 200
        assert resp.json()["position"] == "CTO"
        assert resp.json()["companyName"] == "Acme Corp"

    def test_delete_removes_jobs(self, client, employer, job):
        employer_id = employer["profile"]["employerId"]
        assert client.delete(f"/api/Employer/{employer_id}", headers=employer["headers"]).status_code == 204
        assert client.get(f"/api/Job/{job['jobId']}").status_code == 404


class TestJobSeekers:
    def test_create(self, job_seeker):
        profile = job_seeker["profile"]
        assert profile["skills"] == "Python, SQL"
        assert profile["userFullName"] == "Sam Seeker"

    def test_one_profile_per_user(self, client, job_seeker):
        resp = client.post("/api/JobSeeker", headers=job_seeker["headers"], json={"userId": job_seeker["userId"]})
        assert resp.status_code == 409

    def test_search_by_skill(self, client, make_job_seeker):
        make_job_seeker(full_name="Pat", skills="Go, Kubernetes")
        make_job_seeker(full_name="Kim", skills="Python, Django")
        resp = client.get("/api/JobSeeker/search/skill", params={"skill": "kubernetes"})
        assert [s["userFullName"] for s in resp.json()] == ["Pat"]

    def test_search_by_college(self, client, make_job_seeker):
        make_job_seeker(full_name="Pat", college="MIT")
        make_job_seeker(full_name="Kim", college="Stanford University")
        resp = client.get("/api/JobSeeker/search/college", params={"name": "stanford"})
        assert [s["userFullName"] for s in resp.json()] == ["Kim"]

    def test_by_user(self, client, job_seeker):
        resp = client.get(f"/api/JobSeeker/by-user/{job_seeker['userId']}", headers=job_seeker["headers"])
        assert resp.status_code == 200
        assert resp.json()["jobSeekerId"] == job_seeker["profile"]["jobSeekerId"]

    def test_update(self, client, job_seeker):
        seeker_id = job_seeker["profile"]["jobSeekerId"]
        resp = client.put(f"/api/JobSeeker/{seeker_id}", headers=job_seeker["headers"], json={
            "experience": "3 years", "workStatus": "Employed",
        })
        assert resp.status_code == 200
        assert resp.json()["experience"] == "3 years"
        assert resp.json()["skills"] == "Python, SQL"

    def test_delete_without_dependents(self, client, admin, job_seeker):
        seeker_id = job_seeker["profile"]["jobSeekerId"]
        assert client.delete(f"/api/JobSeeker/{seeker_id}", headers=job_seeker["headers"]).status_code == 204
        assert client.get(f"/api/JobSeeker/{seeker_id}", headers=admin["headers"]).status_code == 404

    def test_delete_with_resume_refused(self, client, job_seeker, resume):
        seeker_id = job_seeker["profile"]["jobSeekerId"]
        resp = client.delete(f"/api/JobSeeker/{seeker_id}", headers=job_seeker["headers"])
        assert resp.status_code == 409
        assert "cannot be deleted" in resp.json()["error"]
