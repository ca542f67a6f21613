"""
Tests for notifications, their email copies and direct messages.
"""


def _notify(client, admin, user, message="Hello", **fields):
    payload = {"userId": user["userId"], "message": message}
    payload.update(fields)
    return client.post("/api/Notification", headers=admin["headers"], json=payload)


class TestCreate:
    def test_create_without_email(self, client, email_service, admin, make_user):
        user = make_user()
        resp = _notify(client, admin, user, subject="Hi")
        assert resp.status_code == 201
        data = resp.json()
        assert data["isRead"] is False
        assert data["sentEmail"] is False
        assert data["userEmail"] == user["email"]
        email_service.send_email.assert_not_awaited()

    def test_create_with_email(self, client, email_service, admin, make_user):
        user = make_user()
        resp = _notify(client, admin, user, message="Line one\nLine <two>", sendEmail=True)
        assert resp.json()["sentEmail"] is True

        to_email, subject, html = email_service.send_email.await_args.args[:3]
        assert to_email == user["email"]
        assert subject == "Notification from HireHub"
        assert html == "<p>Line one<br/>Line &lt;two&gt;</p>"

    def test_email_exception_is_swallowed(self, client, email_service, admin, make_user):
        email_service.send_email.side_effect = ConnectionError("relay down")
        resp = _notify(client, admin, make_user(), sendEmail=True)
        assert resp.status_code == 201
        assert resp.json()["sentEmail"] is False

    def test_unknown_user(self, client, admin):
        resp = client.post("/api/Notification", headers=admin["headers"], json={
            "userId": "00000000-0000-0000-0000-000000000000", "message": "Hello",
        })
        assert resp.status_code == 404

    def test_admin_only(self, client, make_user):
        user = make_user()
        resp = client.post("/api/Notification", headers=user["headers"], json={
            "userId": user["userId"], "message": "Hello",
        })
        assert resp.status_code == 403


class TestReadState:
    def test_unread_recent_and_mark_read(self, client, admin, make_user):
        user = make_user()
        ids = [_notify(client, admin, user, message=f"n{i}").json()["notificationId"] for i in range(3)]

        recent = client.get(f"/api/Notification/user/{user['userId']}/recent", params={"limit": 2},
                            headers=user["headers"]).json()
        assert [n["message"] for n in recent] == ["n2", "n1"]

        assert client.post(f"/api/Notification/{ids[0]}/mark-read", headers=user["headers"]).status_code == 200
        unread = client.get(f"/api/Notification/user/{user['userId']}/unread", headers=user["headers"]).json()
        assert sorted(n["notificationId"] for n in unread) == sorted(ids[1:])

    def test_mark_all_read(self, client, admin, make_user):
        user = make_user()
        for i in range(2):
            _notify(client, admin, user, message=f"n{i}")

        resp = client.post(f"/api/Notification/user/{user['userId']}/mark-all-read", headers=user["headers"])
        assert resp.json() == {"updated": 2}
        resp = client.post(f"/api/Notification/user/{user['userId']}/mark-all-read", headers=user["headers"])
        assert resp.json() == {"updated": 0}

    def test_mark_read_unknown(self, client, make_user):
        user = make_user()
        resp = client.post("/api/Notification/999/mark-read", headers=user["headers"])
        assert resp.status_code == 404
        assert resp.json() == {"error": "Notification with id '999' not found."}

    def test_update(self, client, admin, make_user):
        user = make_user()
        notification_id = _notify(client, admin, user).json()["notificationId"]
        resp = client.put(f"/api/Notification/{notification_id}", headers=user["headers"], json={
            "isRead": True, "message": "Edited",
        })
        assert resp.status_code == 200
        assert resp.json()["isRead"] is True
        assert resp.json()["message"] == "Edited"

    def test_delete(self, client, admin, make_user):
        user = make_user()
        notification_id = _notify(client, admin, user).json()["notificationId"]
        assert client.delete(f"/api/Notification/{notification_id}", headers=admin["headers"]).status_code == 204
        assert client.get(f"/api/Notification/{notification_id}", headers=user["headers"]).status_code == 404


class TestDirectMessages:
    def test_employer_messages_applicant(self, client, email_service, employer, job_seeker, application):
        resp = client.post("/api/Notification/application/message", headers=employer["headers"], json={
            "applicationId": application["applicationId"], "message": "Are you free on Monday?",
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["userId"] == job_seeker["userId"]
        assert data["subject"] == "Message from employer"
        assert data["sentEmail"] is True
        assert email_service.send_email.await_args.args[0] == job_seeker["email"]

    def test_interview_subject_uses_interview_template(self, client, email_service, employer, application):
        client.post("/api/Notification/application/message", headers=employer["headers"], json={
            "applicationId": application["applicationId"], "message": "See you", "subject": "Interview invite",
        })
        html = email_service.send_email.await_args.args[2]
        assert "has been scheduled" in html

    def test_other_employer_forbidden(self, client, make_employer, application):
        stranger = make_employer("Rival Inc", full_name="Rita Rival")
        resp = client.post("/api/Notification/application/message", headers=stranger["headers"], json={
            "applicationId": application["applicationId"], "message": "Come work for us",
        })
        assert resp.status_code == 403
        assert resp.json()["error"] == "Not authorized to message this applicant."

    def test_unknown_application(self, client, employer):
        resp = client.post("/api/Notification/application/message", headers=employer["headers"], json={
            "applicationId": 999, "message": "Hello",
        })
        assert resp.status_code == 404

    def test_job_seeker_messages_employer(self, client, employer, job_seeker, job):
        resp = client.post("/api/Notification/job/message", headers=job_seeker["headers"], json={
            "jobId": job["jobId"], "message": "Is the role remote?", "sendEmail": False,
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["userId"] == employer["userId"]
        assert data["message"] == "Sam Seeker: Is the role remote?"
        assert data["subject"] == "Message about Backend Developer"
        assert data["sentEmail"] is False

    def test_job_seeker_without_profile(self, client, make_user, job):
        user = make_user("JobSeeker")
        resp = client.post("/api/Notification/job/message", headers=user["headers"], json={
            "jobId": job["jobId"], "message": "Hi",
        })
        assert resp.status_code == 404

    def test_long_message_to_employer_is_truncated(self, client, employer, job_seeker, job):
        """The sender prefix pushes a full-length message past the column size."""
        resp = client.post("/api/Notification/job/message", headers=job_seeker["headers"], json={
            "jobId": job["jobId"], "message": "m" * 300, "sendEmail": False,
        })
        assert resp.status_code == 201
        data = resp.json()
        assert len(data["message"]) == 300
        assert data["message"].startswith("Sam Seeker: mmm")

    def test_long_job_title_in_default_subject(self, client, employer, job_seeker, make_job):
        job = make_job(employer, title="T" * 200)
        resp = client.post("/api/Notification/job/message", headers=job_seeker["headers"], json={
            "jobId": job["jobId"], "message": "Still open?", "sendEmail": False,
        })
        assert resp.status_code == 201
        assert resp.json()["subject"] == ("Message about " + "T" * 200)[:100]
