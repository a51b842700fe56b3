# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request models for the public site forms."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class NewsletterRequest(BaseModel):
    email: Optional[str] = None


class TournamentRegistrationRequest(BaseModel):
    team_name: Optional[str] = Field(default=None, alias="teamName")
    captain: Optional[str] = None
    email: Optional[str] = None
    experience: Optional[str] = None
    info: Optional[str] = None
    tournament_id: Optional[int] = Field(default=None, alias="tournamentId")

    model_config = {"populate_by_name": True}
