from pydantic import BaseModel
from typing import Optional


class Rsvp(BaseModel):
    # Required fields are checked in helper.validate_rsvp so that missing
    # values produce a 400 with a readable message instead of a 422.
    name: Optional[str] = None
    time: Optional[str] = None
    email: Optional[str] = None
