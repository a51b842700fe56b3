import pytest

from models.submission import ContactMessage, NewsletterSubscriber, TournamentRegistration

CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "subject": "Sponsorship",
    "message": "Hello there",
}

TEAM = {
    "teamName": "Team Thunder",
    "captain": "Alex Chen",
    "email": "alex@example.com",
    "experience": "professional",
}


def test_contact_stores_one_row(client, db):
    r = client.post("/api/contact", json=CONTACT)

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Message sent successfully"}
    row = db.query(ContactMessage).one()
    assert (row.name, row.subject, row.message) == ("Jane Doe", "Sponsorship", "Hello there")


@pytest.mark.parametrize("field", ["name", "email", "subject", "message"])
def test_contact_requires_every_field(client, db, field):
    payload = {**CONTACT, field: " "}

    r = client.post("/api/contact", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": "All fields are required"}
    assert db.query(ContactMessage).count() == 0


def test_newsletter_subscribe_is_idempotent(client, db):
    first = client.post("/api/newsletter", json={"email": "fan@example.com"})
    again = client.post("/api/newsletter", json={"email": "FAN@example.com"})

    assert first.status_code == again.status_code == 200
    assert again.json() == {"success": True, "message": "Successfully subscribed to newsletter"}
    assert [s.email for s in db.query(NewsletterSubscriber).all()] == ["fan@example.com"]


@pytest.mark.parametrize(
    "payload, message",
    [({}, "Email is required"), ({"email": "fan-at-example"}, "Invalid email format")],
)
def test_newsletter_rejects_bad_input(client, db, payload, message):
    r = client.post("/api/newsletter", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": message}
    assert db.query(NewsletterSubscriber).count() == 0


def test_tournament_registration_stores_optional_fields(client, db):
    r = client.post("/api/tournament-register", json={**TEAM, "info": "We bring snacks"})

    assert r.status_code == 200
    assert r.json()["message"] == "Registration submitted successfully"
    row = db.query(TournamentRegistration).one()
    assert row.team_name == "Team Thunder"
    assert row.additional_info == "We bring snacks"
    assert row.tournament_id is None


@pytest.mark.parametrize("field", ["teamName", "captain", "email", "experience"])
def test_tournament_registration_requires_core_fields(client, db, field):
    payload = {k: v for k, v in TEAM.items() if k != field}

    r = client.post("/api/tournament-register", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": "All required fields must be filled"}
    assert db.query(TournamentRegistration).count() == 0


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
