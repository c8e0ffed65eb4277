"""Pydantic schemas for request/response validation."""

from .agency import *  # noqa: F403
from .booking import *  # noqa: F403
from .common import *  # noqa: F403
from .health import *  # noqa: F403
from .hotel import *  # noqa: F403
from .location import *  # noqa: F403
from .property import *  # noqa: F403
from .travel_offer import *  # noqa: F403
from .user import *  # noqa: F403
