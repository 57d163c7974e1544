from fastapi import APIRouter
from flightquery.api.v1.routes.tickets import router as tickets_router
from flightquery.api.v1.routes.flights import router as flights_router

# Mounted at the root: clients call /ticket, /departures and /flight-duration directly.
api_router = APIRouter()
api_router.include_router(tickets_router)
api_router.include_router(flights_router)
