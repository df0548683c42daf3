from pydantic import BaseModel


class RsvpRecord(BaseModel):
    number: int
    name: str
    time: str
    timestamp: str
    email: str = ""

    def to_row(self) -> list:
        """Column order in the sheet: A number, B name, C time, D timestamp, E email."""
        return [self.number, self.name, self.time, self.timestamp, self.email]
