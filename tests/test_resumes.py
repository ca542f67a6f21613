"""
Tests for resume metadata, file uploads and the default resume.
"""

import os


def _upload(client, seeker, name="Uploaded CV", content=b"Experienced with python and docker.",
            filename="cv.txt", **form):
    data = {"jobSeekerId": seeker["profile"]["jobSeekerId"], "resumeName": name}
    data.update(form)
    files = {"file": (filename, content, "text/plain")} if filename else None
    return client.post("/api/Resume/upload", headers=seeker["headers"], data=data, files=files)


class TestResumeMetadata:
    def test_create(self, resume, job_seeker):
        assert resume["resumeName"] == "Main CV"
        assert resume["isDefault"] is True
        assert resume["jobSeekerName"] == "Sam Seeker"
        assert resume["filePath"] is None

    def test_duplicate_name_case_insensitive(self, client, job_seeker, resume):
        resp = client.post("/api/Resume/metadata", headers=job_seeker["headers"], json={
            "jobSeekerId": job_seeker["profile"]["jobSeekerId"], "resumeName": "main cv",
        })
        assert resp.status_code == 409

    def test_same_name_for_different_seekers(self, make_job_seeker, make_resume):
        make_resume(make_job_seeker(full_name="A"), name="CV")
        make_resume(make_job_seeker(full_name="B"), name="CV")

    def test_single_default(self, client, job_seeker, make_resume):
        first = make_resume(job_seeker, name="First")
        second = make_resume(job_seeker, name="Second")
        resumes = client.get(
            f"/api/Resume/jobseeker/{job_seeker['profile']['jobSeekerId']}", headers=job_seeker["headers"]
        ).json()
        defaults = {r["resumeId"]: r["isDefault"] for r in resumes}
        assert defaults == {first["resumeId"]: False, second["resumeId"]: True}

    def test_get_default(self, client, job_seeker, resume):
        resp = client.get(
            f"/api/Resume/jobseeker/{job_seeker['profile']['jobSeekerId']}/default", headers=job_seeker["headers"]
        )
        assert resp.status_code == 200
        assert resp.json()["resumeId"] == resume["resumeId"]

    def test_no_default(self, client, job_seeker):
        resp = client.get(
            f"/api/Resume/jobseeker/{job_seeker['profile']['jobSeekerId']}/default", headers=job_seeker["headers"]
        )
        assert resp.status_code == 404
        assert resp.json()["error"].startswith("No default resume found")

    def test_set_default(self, client, job_seeker, make_resume):
        first = make_resume(job_seeker, name="First")
        make_resume(job_seeker, name="Second")
        seeker_id = job_seeker["profile"]["jobSeekerId"]

        resp = client.post(
            f"/api/Resume/jobseeker/{seeker_id}/set-default/{first['resumeId']}", headers=job_seeker["headers"]
        )
        assert resp.status_code == 200
        default = client.get(f"/api/Resume/jobseeker/{seeker_id}/default", headers=job_seeker["headers"]).json()
        assert default["resumeId"] == first["resumeId"]

    def test_set_default_of_other_seeker(self, client, job_seeker, make_job_seeker, make_resume):
        foreign = make_resume(make_job_seeker(full_name="Other"))
        resp = client.post(
            f"/api/Resume/jobseeker/{job_seeker['profile']['jobSeekerId']}/set-default/{foreign['resumeId']}",
            headers=job_seeker["headers"],
        )
        assert resp.status_code == 404

    def test_update_rejects_taken_name(self, client, job_seeker, make_resume):
        make_resume(job_seeker, name="Taken")
        other = make_resume(job_seeker, name="Free")
        resp = client.put(f"/api/Resume/{other['resumeId']}", headers=job_seeker["headers"], json={
            "resumeName": "TAKEN",
        })
        assert resp.status_code == 409

    def test_update(self, client, job_seeker, resume):
        resp = client.put(f"/api/Resume/{resume['resumeId']}", headers=job_seeker["headers"], json={
            "resumeName": "Main CV", "parsedSkills": "Python, Go",
        })
        assert resp.status_code == 200
        assert resp.json()["parsedSkills"] == "Python, Go"
        assert resp.json()["isDefault"] is True

    def test_employer_can_read_resume(self, client, employer, resume):
        assert client.get(f"/api/Resume/{resume['resumeId']}", headers=employer["headers"]).status_code == 200

    def test_list_is_admin_only(self, client, admin, job_seeker, resume):
        assert client.get("/api/Resume", headers=job_seeker["headers"]).status_code == 403
        assert len(client.get("/api/Resume", headers=admin["headers"]).json()) == 1


class TestResumeUpload:
    def test_upload_extracts_skills_from_job_vocabulary(self, client, upload_dir, job, job_seeker):
        resp = _upload(client, job_seeker)
        assert resp.status_code == 201
        data = resp.json()
        assert data["fileType"] == "txt"
        assert data["filePath"].startswith("Uploads/")
        assert data["parsedSkills"] == "Python, Docker"
        assert os.path.exists(os.path.join(upload_dir, os.path.basename(data["filePath"])))

    def test_given_skills_win(self, client, job, job_seeker):
        resp = _upload(client, job_seeker, parsedSkills="Cobol")
        assert resp.json()["parsedSkills"] == "Cobol"

    def test_upload_without_file(self, client, job_seeker):
        resp = _upload(client, job_seeker, filename=None, isDefault="true")
        assert resp.status_code == 201
        assert resp.json()["filePath"] is None
        assert resp.json()["isDefault"] is True

    def test_stored_file_is_served(self, client, job_seeker):
        data = _upload(client, job_seeker, content=b"plain resume").json()
        resp = client.get(f"/{data['filePath']}")
        assert resp.status_code == 200
        assert resp.content == b"plain resume"

    def test_unsupported_type(self, client, job_seeker):
        resp = _upload(client, job_seeker, filename="cv.exe", content=b"MZ")
        assert resp.status_code == 400

    def test_empty_file(self, client, job_seeker):
        resp = _upload(client, job_seeker, content=b"")
        assert resp.status_code == 400

    def test_blank_name(self, client, job_seeker):
        resp = _upload(client, job_seeker, name="   ")
        assert resp.status_code == 400
        assert resp.json() == {"message": "resumeName is required"}

    def test_name_too_long(self, client, job_seeker):
        resp = _upload(client, job_seeker, name="x" * 151)
        assert resp.status_code == 400
        assert resp.json() == {"message": "resumeName must be at most 150 characters"}

    def test_duplicate_name_leaves_no_file(self, client, upload_dir, job_seeker, resume):
        before = set(os.listdir(upload_dir))
        resp = _upload(client, job_seeker, name="Main CV")
        assert resp.status_code == 409
        assert set(os.listdir(upload_dir)) == before

    def test_formats(self, client):
        resp = client.get("/api/Resume/formats")
        assert resp.status_code == 200
        extensions = [f["extension"] for f in resp.json()["supported_formats"]]
        assert extensions == [".pdf", ".docx", ".txt"]


class TestResumeDelete:
    def test_delete_removes_file(self, client, upload_dir, job_seeker):
        data = _upload(client, job_seeker).json()
        stored = os.path.join(upload_dir, os.path.basename(data["filePath"]))

        resp = client.delete(f"/api/Resume/{data['resumeId']}", headers=job_seeker["headers"])
        assert resp.status_code == 204
        assert not os.path.exists(stored)

    def test_delete_used_resume_refused(self, client, job_seeker, resume, application):
        resp = client.delete(f"/api/Resume/{resume['resumeId']}", headers=job_seeker["headers"])
        assert resp.status_code == 409

    def test_delete_unknown(self, client, job_seeker):
        assert client.delete("/api/Resume/4242", headers=job_seeker["headers"]).status_code == 404
