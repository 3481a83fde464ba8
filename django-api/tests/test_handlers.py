"""HTTP tests for the session and event endpoints."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from events.seed import SEED_EVENTS

PASSWORD = "Campus-Night-42"

NEW_EVENT = {
    "title": "Robotics Expo",
    "category": "Tech Events",
    "date": "2026-04-01",
    "time": "10:00 AM",
    "location": "Hall 3",
    "description": "Robots on parade.",
}

REGISTRATION = {
    "name": "Ana",
    "email": "ana@example.com",
    "phone": "555-0100",
    "college_or_company": "State U",
    "year_of_study": "3",
}


def sign_up(client: APIClient, email: str, role: str):
    return client.post(
        "/api/auth/signup",
        {"email": email, "password": PASSWORD, "role": role},
        format="json",
    )


@pytest.fixture
def organizer(api_client) -> APIClient:
    assert sign_up(api_client, "dev@example.com", "organizer").status_code == 201
    return api_client


@pytest.fixture
def participant() -> APIClient:
    client = APIClient()
    assert sign_up(client, "ana@example.com", "participant").status_code == 201
    return client


@pytest.mark.django_db
class TestSessionEndpoints:
    def test_anonymous_session(self, api_client):
        """A fresh client gets a resolved anonymous session."""
        response = api_client.get("/api/auth/session")
        assert response.status_code == 200
        assert response.json() == {
            "identity": None,
            "role": None,
            "loading": False,
            "state": "anonymous",
        }

    def test_sign_up_signs_in_with_role(self, api_client):
        response = sign_up(api_client, "Dev@Example.com", "organizer")
        assert response.status_code == 201
        body = response.json()
        assert body["state"] == "authenticated_with_role"
        assert body["role"] == "organizer"
        assert body["identity"]["email"] == "dev@example.com"

        # The session cookie carries the identity into the next request.
        assert api_client.get("/api/auth/session").json()["role"] == "organizer"

    def test_sign_up_rejects_bad_email(self, api_client):
        response = sign_up(api_client, "not-an-email", "organizer")
        assert response.status_code == 400
        assert response.json()["detail"] == "Enter a valid email address."

    def test_sign_up_rejects_duplicate_email(self, organizer):
        response = sign_up(APIClient(), "dev@example.com", "participant")
        assert response.status_code == 400
        assert response.json()["detail"] == "An account with this email already exists."

    def test_sign_up_requires_a_role(self, api_client):
        response = api_client.post(
            "/api/auth/signup",
            {"email": "a@example.com", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 400
        assert "role" in response.json()

    def test_sign_in_restores_role(self, organizer):
        organizer.post("/api/auth/signout")
        client = APIClient()
        response = client.post(
            "/api/auth/signin",
            {"email": "dev@example.com", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["role"] == "organizer"

    def test_sign_in_with_wrong_password(self, organizer):
        response = APIClient().post(
            "/api/auth/signin",
            {"email": "dev@example.com", "password": "nope-nope"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid email or password."

    def test_sign_out(self, organizer):
        response = organizer.post("/api/auth/signout")
        assert response.status_code == 200
        assert response.json()["state"] == "anonymous"
        assert organizer.get("/api/auth/session").json()["identity"] is None

    def test_assign_role_without_session(self, api_client):
        response = api_client.post(
            "/api/auth/role", {"role": "organizer"}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["code"] == "NO_ACTIVE_SESSION"

    def test_federated_without_verifier_fails(self, api_client):
        response = api_client.post(
            "/api/auth/federated", {"role": "participant"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Federated sign-in failed."


@pytest.mark.django_db
class TestFederatedSignIn:
    @pytest.fixture(autouse=True)
    def federated_urls(self, settings):
        settings.ROOT_URLCONF = "tests.federated_urls"

    def federated(self, client, email, role=None):
        payload = {"role": role} if role else {}
        return client.post(
            "/api/auth/federated",
            payload,
            format="json",
            HTTP_X_FEDERATED_EMAIL=email,
        )

    def test_new_identity_takes_pending_role(self, api_client):
        response = self.federated(api_client, "grace@example.com", "participant")
        assert response.status_code == 200
        body = response.json()
        assert body["role"] == "participant"
        assert body["needs_role"] is False
        assert body["identity"]["display_name"] == "Grace Hopper"

    def test_returning_identity_keeps_stored_role(self, api_client):
        self.federated(api_client, "grace@example.com", "participant")
        response = self.federated(APIClient(), "grace@example.com", "organizer")
        assert response.json()["role"] == "participant"

    def test_identity_without_role_is_asked_for_one(self, api_client):
        """No stored or pending role leaves the session waiting for a choice."""
        response = self.federated(api_client, "grace@example.com")
        assert response.json()["needs_role"] is True
        assert response.json()["state"] == "authenticated_no_role"

        response = api_client.post(
            "/api/auth/role", {"role": "organizer"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["role"] == "organizer"

    def test_abandoned_flow(self, api_client):
        response = api_client.post("/api/auth/federated", {}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "FEDERATED_AUTH_FAILED"


@pytest.mark.django_db
class TestAccessGate:
    def test_anonymous_is_sent_to_sign_in(self, api_client):
        response = api_client.get("/api/organizer/events")
        assert response.status_code == 401
        assert response.json()["redirect"] == "/auth"

    def test_wrong_role_is_sent_to_landing(self, participant):
        response = participant.get("/api/organizer/registrations")
        assert response.status_code == 403
        assert response.json()["redirect"] == "/"

    def test_organizer_cannot_register(self, organizer):
        response = organizer.post(
            "/api/events/ev1/registrations", REGISTRATION, format="json"
        )
        assert response.status_code == 403


@pytest.mark.django_db
class TestEventEndpoints:
    def test_public_listing_shows_seed(self, api_client):
        """Anyone can browse the catalog."""
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert [event["id"] for event in response.json()] == [
            event.id for event in SEED_EVENTS
        ]

    def test_listing_by_category(self, api_client):
        response = api_client.get("/api/events", {"category": "Dance & Music"})
        assert [event["id"] for event in response.json()] == ["ev3"]

    def test_listing_rejects_unknown_category(self, api_client):
        assert api_client.get("/api/events", {"category": "Sports"}).status_code == 400

    def test_create_event_is_owned_by_organizer(self, organizer):
        uid = organizer.get("/api/auth/session").json()["identity"]["uid"]
        response = organizer.post("/api/organizer/events", NEW_EVENT, format="json")
        assert response.status_code == 201
        event = response.json()
        assert event["created_by_uid"] == uid
        assert event["id"].startswith("ev-")

        mine = organizer.get("/api/organizer/events", {"scope": "mine"}).json()
        others = organizer.get("/api/organizer/events", {"scope": "others"}).json()
        assert [item["id"] for item in mine] == [event["id"]]
        assert len(others) == len(SEED_EVENTS)

    def test_edit_own_event(self, organizer):
        created = organizer.post(
            "/api/organizer/events", NEW_EVENT, format="json"
        ).json()
        response = organizer.post(
            "/api/organizer/events",
            {**NEW_EVENT, "id": created["id"], "title": "Robotics Expo II"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Robotics Expo II"
        assert response.json()["created_by_uid"] == created["created_by_uid"]

    def test_cannot_edit_someone_elses_event(self, organizer):
        response = organizer.post(
            "/api/organizer/events", {**NEW_EVENT, "id": "ev1"}, format="json"
        )
        assert response.status_code == 403

    def test_unknown_scope(self, organizer):
        response = organizer.get("/api/organizer/events", {"scope": "everyone"})
        assert response.status_code == 400

    def test_sync_writes_merged_view(self, organizer):
        response = organizer.post("/api/organizer/events/sync")
        assert response.status_code == 200
        assert response.json() == {"synced": len(SEED_EVENTS)}

    def test_media_upload(self, organizer):
        created = organizer.post(
            "/api/organizer/events", NEW_EVENT, format="json"
        ).json()
        upload = SimpleUploadedFile("poster.png", b"\x89PNG", content_type="image/png")
        response = organizer.post(
            f"/api/organizer/events/{created['id']}/media",
            {"file": upload},
            format="multipart",
        )
        assert response.status_code == 201
        assert response.json()["url"] == f"/media/events/{created['id']}/poster.png"

    def test_media_upload_for_unknown_event(self, organizer):
        upload = SimpleUploadedFile("poster.png", b"\x89PNG", content_type="image/png")
        response = organizer.post(
            "/api/organizer/events/ev404/media", {"file": upload}, format="multipart"
        )
        assert response.status_code == 404


@pytest.mark.django_db
class TestRegistrationEndpoints:
    def test_participant_registration_reaches_organizer(self, organizer, participant):
        """Organizers see registrations for their own events only."""
        event = organizer.post(
            "/api/organizer/events", NEW_EVENT, format="json"
        ).json()

        response = participant.post(
            f"/api/events/{event['id']}/registrations", REGISTRATION, format="json"
        )
        assert response.status_code == 201
        assert response.json()["event_id"] == event["id"]
        participant.post("/api/events/ev1/registrations", REGISTRATION, format="json")

        listing = organizer.get("/api/organizer/registrations").json()
        assert listing["count"] == 1
        assert listing["registrations"][0]["event_title"] == "Robotics Expo"
        assert listing["registrations"][0]["registration"]["name"] == "Ana"

    def test_registration_for_unknown_event(self, participant):
        response = participant.post(
            "/api/events/ev404/registrations", REGISTRATION, format="json"
        )
        assert response.status_code == 404

    def test_registration_validates_form(self, participant):
        response = participant.post(
            "/api/events/ev1/registrations", {"name": "Ana"}, format="json"
        )
        assert response.status_code == 400
