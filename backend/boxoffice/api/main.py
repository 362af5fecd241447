from fastapi import APIRouter

from boxoffice.api.routes import (
    add_ons,
    orders,
    purchases,
    showtimes,
)

api_router = APIRouter()
api_router.include_router(purchases.router)
api_router.include_router(showtimes.router)
api_router.include_router(orders.router)
api_router.include_router(add_ons.router)
