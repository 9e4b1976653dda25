from unittest.mock import patch

from backend.app.models.job import Job
from backend.app.models.saved_job import SavedJob

JOB_ID = "507f1f77bcf86cd799439011"
MISSING_ID = "aaaaaaaaaaaaaaaaaaaaaaaa"


def test_end_to_end_save_repeat_remove_list(client, job):
    r = client.post("/signup", json={"username": "alice", "password": "p1"})
    assert r.status_code == 201, r.text

    r = client.post("/signin", json={"username": "alice", "password": "p1"})
    assert r.status_code == 200, r.text
    headers = {"Authorization": f"Bearer {r.json()['token']}"}

    r = client.post(f"/save-jobs/{JOB_ID}", headers=headers)
    assert r.status_code == 200, r.text
    assert r.json() == {
        "success": True,
        "message": "Job saved successfully",
        "savedJobs": [JOB_ID],
    }

    r = client.post(f"/save-jobs/{JOB_ID}", headers=headers)
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Job already saved"
    assert r.json()["savedJobs"] == [JOB_ID]

    r = client.delete(f"/saved-jobs/{JOB_ID}", headers=headers)
    assert r.status_code == 200, r.text
    assert r.json() == {"success": True, "message": "Job removed from saved jobs"}

    r = client.get("/saved-jobs", headers=headers)
    assert r.status_code == 200, r.text
    assert r.json() == {"success": True, "jobs": []}


def test_save_is_idempotent_in_storage(client, alice, job, db_session):
    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])
    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])

    rows = db_session.query(SavedJob).filter(SavedJob.user_id == alice["userId"]).all()
    assert [row.job_id for row in rows] == [JOB_ID]


def test_saved_jobs_keep_insertion_order(client, alice, make_job):
    ids = [make_job(role=f"Role {i}").id for i in range(3)]
    for job_id in reversed(ids):
        r = client.post(f"/save-jobs/{job_id}", headers=alice["headers"])
        assert r.status_code == 200, r.text

    assert r.json()["savedJobs"] == list(reversed(ids))

    listed = client.get("/saved-jobs", headers=alice["headers"]).json()["jobs"]
    assert [item["id"] for item in listed] == list(reversed(ids))


def test_list_saved_jobs_returns_full_details(client, alice, job):
    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])

    jobs = client.get("/saved-jobs", headers=alice["headers"]).json()["jobs"]
    assert len(jobs) == 1
    detail = jobs[0]
    assert detail["id"] == JOB_ID
    assert detail["company"] == "Acme"
    assert detail["description"]["responsibilities"] == ["Build APIs", "Review code"]
    assert detail["skills"]["languages"] == ["English", "German"]
    assert detail["employment"]["minExperience"] == 2


def test_save_invalid_job_id_is_400(client, alice):
    r = client.post("/save-jobs/not-an-id", headers=alice["headers"])
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid ID format"}


def test_save_unknown_job_is_404(client, alice):
    r = client.post(f"/save-jobs/{MISSING_ID}", headers=alice["headers"])
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "User or job not found"}


def test_remove_job_not_saved_is_404(client, alice, job):
    r = client.delete(f"/saved-jobs/{JOB_ID}", headers=alice["headers"])
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Job not found in saved jobs"}


def test_remove_twice_second_is_404(client, alice, job):
    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])
    assert client.delete(f"/saved-jobs/{JOB_ID}", headers=alice["headers"]).status_code == 200
    assert client.delete(f"/saved-jobs/{JOB_ID}", headers=alice["headers"]).status_code == 404


def test_remove_invalid_id_is_400(client, alice):
    r = client.delete("/saved-jobs/123", headers=alice["headers"])
    assert r.status_code == 400


def test_dangling_saved_job_is_omitted_from_listing(client, alice, job, make_job, db_session):
    other = make_job(role="Data Engineer")
    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])
    client.post(f"/save-jobs/{other.id}", headers=alice["headers"])

    # Job removed from the store behind the API's back.
    db_session.query(Job).filter(Job.id == JOB_ID).delete()
    db_session.commit()

    jobs = client.get("/saved-jobs", headers=alice["headers"]).json()["jobs"]
    assert [item["id"] for item in jobs] == [other.id]

    # The reference itself is left in place.
    remaining = db_session.query(SavedJob).filter(SavedJob.user_id == alice["userId"]).count()
    assert remaining == 2


def test_users_have_independent_lists(client, alice, job):
    client.post("/signup", json={"username": "bob", "password": "pw"})
    bob_token = client.post("/signin", json={"username": "bob", "password": "pw"}).json()["token"]
    bob_headers = {"Authorization": f"Bearer {bob_token}"}

    client.post(f"/save-jobs/{JOB_ID}", headers=alice["headers"])

    assert client.get("/saved-jobs", headers=bob_headers).json()["jobs"] == []
    assert client.delete(f"/saved-jobs/{JOB_ID}", headers=bob_headers).status_code == 404


def test_token_for_deleted_user_is_404(client, job):
    from backend.app.utils.jwt import create_access_token

    token = create_access_token(MISSING_ID, "ghost")
    headers = {"Authorization": f"Bearer {token}"}

    assert client.get("/saved-jobs", headers=headers).status_code == 404
    assert client.post(f"/save-jobs/{JOB_ID}", headers=headers).status_code == 404


class TestAccessGuard:
    def test_missing_header_is_401(self, client):
        r = client.get("/saved-jobs")
        assert r.status_code == 401
        assert r.json() == {"success": False, "error": "Unauthorized"}

    def test_wrong_scheme_is_401(self, client, alice):
        r = client.get("/saved-jobs", headers={"Authorization": f"Token {alice['token']}"})
        assert r.status_code == 401
        assert r.json()["error"] == "Unauthorized"

    def test_garbage_token_is_401(self, client):
        r = client.get("/saved-jobs", headers={"Authorization": "Bearer abc.def.ghi"})
        assert r.status_code == 401
        assert r.json()["error"] == "Invalid or expired token"

    def test_rejected_before_store_is_touched(self, client):
        from backend.app.services.saved_jobs import SavedJobsManager

        with patch.object(SavedJobsManager, "save_job") as save_job, \
                patch.object(SavedJobsManager, "list_saved_jobs") as list_saved, \
                patch.object(SavedJobsManager, "remove_job") as remove_job:
            assert client.post(f"/save-jobs/{JOB_ID}").status_code == 401
            assert client.get("/saved-jobs").status_code == 401
            assert client.delete(f"/saved-jobs/{JOB_ID}").status_code == 401

        save_job.assert_not_called()
        list_saved.assert_not_called()
        remove_job.assert_not_called()

    def test_expired_token_is_401(self, client, alice):
        from backend.app.utils.jwt import TokenAuthority

        expired = TokenAuthority(expire_days=-1).issue(alice["userId"], "alice")
        r = client.get("/saved-jobs", headers={"Authorization": f"Bearer {expired}"})
        assert r.status_code == 401
        assert r.json()["error"] == "Invalid or expired token"


def test_id_with_trailing_newline_is_400(client, alice, job):
    r = client.post(f"/save-jobs/{JOB_ID}%0A", headers=alice["headers"])
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid ID format"}
