# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Read-only site content: news, tournaments, teams, players."""

from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey
from sqlalchemy.sql import func

from database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    category = Column(String(64), nullable=False)
    content = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    author = Column(String(255), nullable=True)
    image = Column(String(512), nullable=True)


class Tournament(Base):
    __tablename__ = "tournaments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    game = Column(String(128), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    prize = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False, default="upcoming")
    location = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    game = Column(String(128), nullable=False)
    region = Column(String(128), nullable=False)
    tier = Column(String(32), nullable=False, default="Tier 1")
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True)
    game = Column(String(128), nullable=False)
    rank = Column(Integer, nullable=True)
    kda = Column(Float, nullable=True)
    win_rate = Column(Float, nullable=True)
