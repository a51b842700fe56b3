from datetime import datetime, timezone

from sqlalchemy.exc import OperationalError

from models.content import News, Player, Team, Tournament


def _dt(day: int) -> datetime:
    return datetime(2025, 1, day, 12, 0, tzinfo=timezone.utc)


def test_empty_tables_serve_built_in_listings(client):
    news = client.get("/api/news").json()
    tournaments = client.get("/api/tournaments").json()
    teams = client.get("/api/teams").json()
    players = client.get("/api/players").json()

    assert news[0]["title"] == "Championship Finals This Weekend"
    assert news[0]["date"] == "2024-12-15"
    assert [t["name"] for t in tournaments] == ["World Championship 2024", "Dota 2 Major Championship"]
    assert teams[0]["name"] == "Team Thunder"
    assert len(teams[0]["players"]) == 5
    assert players[0]["kda"] == 8.2


def test_news_newest_first_and_capped_at_ten(client, db):
    for day in range(1, 13):
        db.add(News(title=f"Story {day}", category="General", content="...", date=_dt(day)))
    db.commit()

    titles = [n["title"] for n in client.get("/api/news").json()]

    assert titles == [f"Story {day}" for day in range(12, 2, -1)]


def test_tournaments_in_calendar_order(client, db):
    db.add_all(
        [
            Tournament(name="Later", game="Dota 2", date=_dt(20), prize=1000),
            Tournament(name="Sooner", game="Dota 2", date=_dt(5), prize=2000),
        ]
    )
    db.commit()

    body = client.get("/api/tournaments").json()

    assert [t["name"] for t in body] == ["Sooner", "Later"]
    assert body[0]["status"] == "upcoming"


def test_teams_by_wins_and_players_by_rank(client, db):
    thunder = Team(name="Team Thunder", game="LoL", region="Europe", wins=45, losses=12)
    storm = Team(name="Team Storm", game="LoL", region="NA", wins=50, losses=3)
    db.add_all([thunder, storm])
    db.commit()
    db.add_all(
        [
            Player(name="Second", team_id=thunder.id, game="LoL", rank=2, kda=4.1, win_rate=61.5),
            Player(name="First", team_id=storm.id, game="LoL", rank=1, kda=8.2, win_rate=78),
        ]
    )
    db.commit()

    teams = client.get("/api/teams").json()
    players = client.get("/api/players").json()

    assert [t["name"] for t in teams] == ["Team Storm", "Team Thunder"]
    assert teams[0]["tier"] == "Tier 1"
    assert teams[0]["players"] == []
    assert [p["name"] for p in players] == ["First", "Second"]
    assert players[0]["team_id"] == storm.id


def test_listing_storage_failure_is_generic_500(client, monkeypatch):
    from sqlalchemy.orm import Query

    def _fail(self):
        raise OperationalError("SELECT", {}, Exception("no such table: news"))

    monkeypatch.setattr(Query, "all", _fail)

    r = client.get("/api/news")

    assert r.status_code == 500
    assert r.json() == {"error": "Database error occurred"}
