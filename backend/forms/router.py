# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Public form submissions – contact, newsletter, tournament registration.

Each handler checks that its required fields are present and non-blank,
then writes exactly one row.  Submitted values are stored as given (after
trimming); none of them are echoed into the log.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from auth.schemas import MessageResponse
from auth.service import is_valid_email, normalize_email
from core.errors import ValidationError, error_boundary
from core.logger import logger
from database import get_db
from forms.schemas import ContactRequest, NewsletterRequest, TournamentRegistrationRequest
from models.submission import ContactMessage, NewsletterSubscriber, TournamentRegistration

router = APIRouter(prefix="/api", tags=["forms"])


def _missing(*values: Optional[str]) -> bool:
    return any(v is None or not v.strip() for v in values)


# ---------------------------------------------------------------------------
# POST /api/contact
# ---------------------------------------------------------------------------


@router.post("/contact", response_model=MessageResponse)
def submit_contact(body: Optional[ContactRequest] = None, db: Session = Depends(get_db)):
    body = body or ContactRequest()
    if _missing(body.name, body.email, body.subject, body.message):
        raise ValidationError("All fields are required")

    with error_boundary("contact submission"):
        msg = ContactMessage(
            name=body.name.strip(),
            email=body.email.strip(),
            subject=body.subject.strip(),
            message=body.message.strip(),
        )
        db.add(msg)
        db.commit()
        logger.info("Contact message stored id=%s", msg.id)

    return MessageResponse(message="Message sent successfully")


# ---------------------------------------------------------------------------
# POST /api/newsletter
# ---------------------------------------------------------------------------


@router.post("/newsletter", response_model=MessageResponse)
def subscribe_newsletter(body: Optional[NewsletterRequest] = None, db: Session = Depends(get_db)):
    """Subscribe an address.  Subscribing twice is a silent no-op."""
    body = body or NewsletterRequest()
    if _missing(body.email):
        raise ValidationError("Email is required")

    email = normalize_email(body.email)
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")

    with error_boundary("newsletter subscription"):
        exists = db.query(NewsletterSubscriber).filter(NewsletterSubscriber.email == email).first()
        if exists is None:
            db.add(NewsletterSubscriber(email=email))
            try:
                db.commit()
            except IntegrityError:
                # Lost a race with an identical subscription; the row is there.
                db.rollback()

    return MessageResponse(message="Successfully subscribed to newsletter")


# ---------------------------------------------------------------------------
# POST /api/tournament-register
# ---------------------------------------------------------------------------


@router.post("/tournament-register", response_model=MessageResponse)
def register_tournament(
    body: Optional[TournamentRegistrationRequest] = None,
    db: Session = Depends(get_db),
):
    body = body or TournamentRegistrationRequest()
    if _missing(body.team_name, body.captain, body.email, body.experience):
        raise ValidationError("All required fields must be filled")

    with error_boundary("tournament registration"):
        reg = TournamentRegistration(
            team_name=body.team_name.strip(),
            captain=body.captain.strip(),
            email=body.email.strip(),
            experience=body.experience.strip(),
            additional_info=body.info,
            tournament_id=body.tournament_id,
        )
        db.add(reg)
        db.commit()
        logger.info("Tournament registration stored id=%s", reg.id)

    return MessageResponse(message="Registration submitted successfully")
