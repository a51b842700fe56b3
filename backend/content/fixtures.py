# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Built-in listings served while the content tables are still empty."""

from datetime import date

MOCK_NEWS = [
    {
        "id": 1,
        "title": "Championship Finals This Weekend",
        "category": "Tournament",
        "content": "The biggest eSports championship of the year is happening this weekend with a prize pool of $1M.",
        "date": date(2024, 12, 15),
        "author": "Sarah Johnson",
        "image": "assets/images/tournaments/tournament-poster.png",
    },
    {
        "id": 2,
        "title": "New Rising Star in Competitive Gaming",
        "category": "Players",
        "content": "Meet the 18-year-old prodigy who's taking the competitive scene by storm.",
        "date": date(2024, 12, 14),
        "author": "Mike Rodriguez",
        "image": "assets/images/players/player1.jpg",
    },
]

MOCK_TOURNAMENTS = [
    {
        "id": 1,
        "name": "World Championship 2024",
        "game": "League of Legends",
        "date": date(2024, 12, 20),
        "prize": 1500000,
        "status": "upcoming",
        "location": "Los Angeles, CA",
    },
    {
        "id": 2,
        "name": "Dota 2 Major Championship",
        "game": "Dota 2",
        "date": date(2025, 2, 10),
        "prize": 1200000,
        "status": "upcoming",
        "location": "Stockholm, Sweden",
    },
]

MOCK_TEAMS = [
    {
        "id": 1,
        "name": "Team Thunder",
        "game": "League of Legends",
        "region": "Europe",
        "tier": "Tier 1",
        "wins": 45,
        "losses": 12,
        "players": [
            {"name": "Alex Lightning Chen", "role": "Top Lane"},
            {"name": "Sarah Storm Johnson", "role": "Jungle"},
            {"name": "Mike Thunder Rodriguez", "role": "Mid Lane"},
            {"name": "Emma Volt Thompson", "role": "ADC"},
            {"name": "James Spark Wilson", "role": "Support"},
        ],
    },
]

MOCK_PLAYERS = [
    {
        "id": 1,
        "name": "Alex Lightning Chen",
        "team_id": 1,
        "game": "League of Legends",
        "rank": 1,
        "kda": 8.2,
        "win_rate": 78,
    },
]
