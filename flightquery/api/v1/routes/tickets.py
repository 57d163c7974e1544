import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from flightquery.api.deps import get_database
from flightquery.db.session import Database
from flightquery.schemas.ticket import TicketRecord
from flightquery.services.ticket_service import fetch_tickets

router = APIRouter(tags=["tickets"])
logger = logging.getLogger(__name__)

TICKET_NOT_FOUND = "No ticket found for the provided passenger ID"


@router.get("/ticket/{ticket_number}", response_model=list[TicketRecord])
async def get_ticket(ticket_number: str, db: Database = Depends(get_database)):
    """Tickets for a passenger id, with departure/arrival split into date and time."""
    try:
        async with db.connect() as conn:
            tickets = await fetch_tickets(conn, ticket_number)
    except Exception:
        logger.exception("Database query error for ticket %s", ticket_number)
        return PlainTextResponse("Error retrieving ticket details", status_code=500)

    if not tickets:
        logger.debug("No ticket rows for passenger %s", ticket_number)
        return JSONResponse(status_code=404, content={"message": TICKET_NOT_FOUND})
    return tickets
