"""FastAPI routers package."""

from .agencies import router as agencies_router
from .auth import router as auth_router
from .booking import router as booking_router
from .health import router as health_router
from .hotels import hotels_router, rooms_router
from .locations import cities_router, countries_router
from .metrics import router as metrics_router
from .properties import router as properties_router
from .travel_offers import router as travel_offers_router
from .users import router as users_router

__all__ = [
    "agencies_router",
    "auth_router",
    "booking_router",
    "cities_router",
    "countries_router",
    "health_router",
    "hotels_router",
    "metrics_router",
    "properties_router",
    "rooms_router",
    "travel_offers_router",
    "users_router",
]

all_routers = [
    health_router,
    auth_router,
    users_router,
    agencies_router,
    countries_router,
    cities_router,
    hotels_router,
    rooms_router,
    properties_router,
    travel_offers_router,
    booking_router,
    metrics_router,
]
