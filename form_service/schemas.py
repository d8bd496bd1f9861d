"""
Submission records and the raw form they are built from.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Submission(BaseModel):
    """
    A new form submission, checked before it is appended.
    Records already in the store are read back as plain dicts.
    """

    id: int = Field(..., description="Milliseconds since epoch at creation")
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ''
    message: str = ''
    timestamp: str = Field(..., description="ISO-8601 UTC creation time")


class SubmissionForm(BaseModel):
    """
    Raw fields as they arrive in the POST body.
    """

    model_config = ConfigDict(extra='ignore')

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None

    def missing_required(self) -> bool:
        return not self.name or not self.email


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """
    Current time, timezone-aware in UTC.
    """

    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """
    ISO-8601 in UTC with milliseconds and a Z suffix.
    """

    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def new_submission(form: SubmissionForm, now: Optional[datetime] = None) -> Submission:
    """
    Builds a record from a validated form.
    The id is derived from the creation time; the store may bump it
    to keep ids strictly increasing.
    """

    now = now or utc_now()

    return Submission(
        id=(now - EPOCH) // timedelta(milliseconds=1),
        name=form.name,
        email=form.email,
        phone=form.phone or '',
        message=form.message or '',
        timestamp=format_timestamp(now),
    )
