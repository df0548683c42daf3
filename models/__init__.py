from .Rsvp import Rsvp
from .RsvpError import RsvpError
from .RsvpRecord import RsvpRecord
