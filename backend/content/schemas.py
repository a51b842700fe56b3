# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic response models for the content endpoints."""

from datetime import date, datetime
from typing import List, Optional, Union

from pydantic import BaseModel

# DB rows carry datetimes; the built-in listings carry plain dates.
DateLike = Union[datetime, date]


class NewsItem(BaseModel):
    id: int
    title: str
    category: str
    content: str
    date: DateLike
    author: Optional[str] = None
    image: Optional[str] = None

    model_config = {"from_attributes": True}


class TournamentItem(BaseModel):
    id: int
    name: str
    game: str
    date: DateLike
    prize: int
    status: str
    location: Optional[str] = None
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class RosterEntry(BaseModel):
    name: str
    role: str


class TeamItem(BaseModel):
    id: int
    name: str
    game: str
    region: str
    tier: str
    wins: int
    losses: int
    players: List[RosterEntry] = []

    model_config = {"from_attributes": True}


class PlayerItem(BaseModel):
    id: int
    name: str
    team_id: Optional[int] = None
    game: str
    rank: Optional[int] = None
    kda: Optional[float] = None
    win_rate: Optional[float] = None

    model_config = {"from_attributes": True}
