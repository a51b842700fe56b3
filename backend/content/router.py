# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Public content listings – news, tournaments, teams, players.

Each endpoint reads its table with a fixed ordering.  While a table is
still empty the built-in listing from ``content.fixtures`` is returned so
the site always has something to render.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from content.fixtures import MOCK_NEWS, MOCK_PLAYERS, MOCK_TEAMS, MOCK_TOURNAMENTS
from content.schemas import NewsItem, PlayerItem, TeamItem, TournamentItem
from core.errors import error_boundary
from database import get_db
from models.content import News, Player, Team, Tournament

router = APIRouter(prefix="/api", tags=["content"])

NEWS_LIMIT = 10


@router.get("/news", response_model=List[NewsItem])
def list_news(db: Session = Depends(get_db)):
    """Latest headlines, newest first."""
    with error_boundary("news listing"):
        rows = db.query(News).order_by(News.date.desc()).limit(NEWS_LIMIT).all()
    return rows or MOCK_NEWS


@router.get("/tournaments", response_model=List[TournamentItem])
def list_tournaments(db: Session = Depends(get_db)):
    """Tournaments in calendar order."""
    with error_boundary("tournament listing"):
        rows = db.query(Tournament).order_by(Tournament.date.asc()).all()
    return rows or MOCK_TOURNAMENTS


@router.get("/teams", response_model=List[TeamItem])
def list_teams(db: Session = Depends(get_db)):
    with error_boundary("team listing"):
        rows = db.query(Team).order_by(Team.wins.desc()).all()
    return rows or MOCK_TEAMS


@router.get("/players", response_model=List[PlayerItem])
def list_players(db: Session = Depends(get_db)):
    with error_boundary("player listing"):
        rows = db.query(Player).order_by(Player.rank.asc()).all()
    return rows or MOCK_PLAYERS
