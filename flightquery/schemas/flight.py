from pydantic import BaseModel

class DepartureRecord(BaseModel):
    """One row of GET /departures. Date and time are formatted by the database."""
    flight_id: int | str
    departure_date: str | None = None
    departure_time: str | None = None
    origin: str | None = None
    destination: str | None = None
    airline: str | None = None

class FlightDuration(BaseModel):
    duration: int | float | str
