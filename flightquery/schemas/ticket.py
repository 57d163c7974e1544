from datetime import datetime
from pydantic import BaseModel

class TicketRecord(BaseModel):
    """One row of GET /ticket/{ticketNumber}."""
    passenger_id: int | str
    flight_id: int | str
    seating_class: str | None = None
    departure_at: datetime | None = None
    arrival_at: datetime | None = None
    origin_code: str | None = None
    origin_airport: str | None = None
    destination_code: str | None = None
    destination_airport: str | None = None
    airplane: str | None = None
    airline: str | None = None
    # Split from departure_at / arrival_at in the server's local time zone
    departure_date: str | None = None
    departure_time: str | None = None
    arrival_date: str | None = None
    arrival_time: str | None = None
