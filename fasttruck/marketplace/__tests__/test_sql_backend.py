"""
Tests for SqlMarketplaceBackend against an in-memory SQLite database.

The `sql_backend` fixture (root conftest.py) gives every test a fresh
database, so no cleanup is needed.

Run: python3 -m pytest fasttruck/marketplace/__tests__/test_sql_backend.py -v
"""
from datetime import date

import pytest

from fasttruck.marketplace.base import BackendError
from fasttruck.marketplace.models import NewApplication, NewJob, SignUpData


def sign_up_and_in(backend, email: str, role: str, first_name: str = "Test", last_name: str = "User"):
    """Register a user and return their session."""
    backend.sign_up(SignUpData(
        email=email,
        password="secret123",
        first_name=first_name,
        last_name=last_name,
        role=role,
    ))
    return backend.sign_in(email, "secret123")


def make_new_job(title: str = "Move sofa", **overrides) -> NewJob:
    fields = {
        "title": title,
        "description": "Three-seater sofa, second floor",
        "budget": 1500.0,
        "deadline": date(2026, 12, 1),
        "pickup_address": "Fort, Mumbai, Maharashtra - 400001",
        "dropoff_address": "Connaught Place, New Delhi, Delhi - 110001",
    }
    fields.update(overrides)
    return NewJob(**fields)


class TestAuth:
    """Sign-up, sign-in, current user and sign-out."""

    def test_sign_up_returns_user(self, sql_backend):
        user = sql_backend.sign_up(SignUpData(
            email="Client@Example.com",
            password="secret123",
            first_name="Asha",
            last_name="Rao",
            role="client",
        ))

        assert user.id
        assert user.email == "client@example.com"
        assert user.full_name == "Asha Rao"
        assert user.role == "client"

    def test_duplicate_sign_up_rejected(self, sql_backend):
        data = SignUpData(
            email="dup@example.com", password="secret123",
            first_name="A", last_name="B", role="client",
        )
        sql_backend.sign_up(data)

        with pytest.raises(BackendError) as exc_info:
            sql_backend.sign_up(data)

        assert exc_info.value.message == "User already registered"

    def test_sign_in_returns_session(self, sql_backend):
        session = sign_up_and_in(sql_backend, "driver@example.com", "freelancer")

        assert session.access_token
        assert session.token_type == "bearer"
        assert session.expires_in > 0
        assert session.user.role == "freelancer"

    def test_sign_in_is_case_insensitive_on_email(self, sql_backend):
        sign_up_and_in(sql_backend, "case@example.com", "client")

        session = sql_backend.sign_in("CASE@example.com", "secret123")

        assert session.user.email == "case@example.com"

    @pytest.mark.parametrize("email, password", [
        ("known@example.com", "wrong-password"),
        ("unknown@example.com", "secret123"),
    ])
    def test_bad_credentials(self, sql_backend, email, password):
        sign_up_and_in(sql_backend, "known@example.com", "client")

        with pytest.raises(BackendError) as exc_info:
            sql_backend.sign_in(email, password)

        assert exc_info.value.message == "Invalid login credentials"
        assert exc_info.value.status_code == 401

    def test_get_current_user(self, sql_backend):
        session = sign_up_and_in(sql_backend, "me@example.com", "client")

        user = sql_backend.get_current_user(session.access_token)

        assert user == session.user

    def test_invalid_token_has_no_user(self, sql_backend):
        assert sql_backend.get_current_user("not-a-jwt") is None

    def test_sign_out_revokes_token(self, sql_backend):
        session = sign_up_and_in(sql_backend, "bye@example.com", "client")

        sql_backend.sign_out(session.access_token)

        assert sql_backend.get_current_user(session.access_token) is None

    def test_sign_out_with_garbage_token_is_noop(self, sql_backend):
        sql_backend.sign_out("garbage")


class TestJobs:
    """Job insert and list."""

    def test_insert_and_list_own_jobs(self, sql_backend):
        client = sign_up_and_in(sql_backend, "client@example.com", "client")

        created = sql_backend.insert_job(client.access_token, make_new_job())
        jobs = sql_backend.list_jobs(client_id=client.user.id)

        assert [j.id for j in jobs] == [created.id]
        assert created.client_id == client.user.id
        assert created.status == "open"
        assert created.deadline == date(2026, 12, 1)
        assert created.pickup_address == "Fort, Mumbai, Maharashtra - 400001"

    def test_list_is_newest_first(self, sql_backend):
        client = sign_up_and_in(sql_backend, "client@example.com", "client")

        first = sql_backend.insert_job(client.access_token, make_new_job("First"))
        second = sql_backend.insert_job(client.access_token, make_new_job("Second"))

        jobs = sql_backend.list_jobs(status="open")

        assert [j.id for j in jobs] == [second.id, first.id]

    def test_list_filters_by_client(self, sql_backend):
        one = sign_up_and_in(sql_backend, "one@example.com", "client")
        two = sign_up_and_in(sql_backend, "two@example.com", "client")
        sql_backend.insert_job(one.access_token, make_new_job("Mine"))
        sql_backend.insert_job(two.access_token, make_new_job("Theirs"))

        jobs = sql_backend.list_jobs(client_id=one.user.id)

        assert [j.title for j in jobs] == ["Mine"]

    def test_freelancer_cannot_post(self, sql_backend):
        freelancer = sign_up_and_in(sql_backend, "driver@example.com", "freelancer")

        with pytest.raises(BackendError) as exc_info:
            sql_backend.insert_job(freelancer.access_token, make_new_job())

        assert exc_info.value.status_code == 403

    def test_unauthenticated_post(self, sql_backend):
        with pytest.raises(BackendError) as exc_info:
            sql_backend.insert_job("bad-token", make_new_job())

        assert exc_info.value.status_code == 401


class TestApplications:
    """Application insert and list."""

    @pytest.fixture
    def posted(self, sql_backend):
        client = sign_up_and_in(sql_backend, "client@example.com", "client", "Asha", "Rao")
        freelancer = sign_up_and_in(sql_backend, "driver@example.com", "freelancer", "Ravi", "Kumar")
        job = sql_backend.insert_job(client.access_token, make_new_job())
        return client, freelancer, job

    def test_apply_and_list_for_freelancer(self, sql_backend, posted):
        client, freelancer, job = posted

        created = sql_backend.insert_application(
            freelancer.access_token, NewApplication(job_id=job.id, proposal="I have a truck")
        )
        mine = sql_backend.list_applications(freelancer_id=freelancer.user.id)

        assert [a.id for a in mine] == [created.id]
        assert created.status == "pending"
        assert created.freelancer_id == freelancer.user.id

    def test_client_listing_includes_applicant_name(self, sql_backend, posted):
        client, freelancer, job = posted
        sql_backend.insert_application(
            freelancer.access_token, NewApplication(job_id=job.id, proposal="I have a truck")
        )

        received = sql_backend.list_applications(client_id=client.user.id)

        assert len(received) == 1
        assert received[0].job_id == job.id
        assert received[0].freelancer_first_name == "Ravi"
        assert received[0].freelancer_last_name == "Kumar"

    def test_client_does_not_see_other_clients_applications(self, sql_backend, posted):
        client, freelancer, job = posted
        sql_backend.insert_application(
            freelancer.access_token, NewApplication(job_id=job.id, proposal="I have a truck")
        )
        other = sign_up_and_in(sql_backend, "other@example.com", "client")

        assert sql_backend.list_applications(client_id=other.user.id) == []

    def test_duplicate_application_rejected(self, sql_backend, posted):
        client, freelancer, job = posted
        application = NewApplication(job_id=job.id, proposal="I have a truck")
        sql_backend.insert_application(freelancer.access_token, application)

        with pytest.raises(BackendError) as exc_info:
            sql_backend.insert_application(freelancer.access_token, application)

        assert exc_info.value.message == "You have already applied to this job"

    def test_unknown_job(self, sql_backend, posted):
        client, freelancer, job = posted

        with pytest.raises(BackendError) as exc_info:
            sql_backend.insert_application(
                freelancer.access_token, NewApplication(job_id="missing", proposal="Hi")
            )

        assert exc_info.value.status_code == 404

    def test_client_cannot_apply(self, sql_backend, posted):
        client, freelancer, job = posted

        with pytest.raises(BackendError) as exc_info:
            sql_backend.insert_application(
                client.access_token, NewApplication(job_id=job.id, proposal="Hi")
            )

        assert exc_info.value.status_code == 403
