"""
Travel Plan Manager - a small interactive log of train rides and fares.

Trips are kept in a single JSON document and edited through a text menu.
"""

from .models import Trip, total_fare
from .store import TripStore
from .editor import TripField, EditSession, apply_field_edit, delete_trip, edit_trip
from .menu import MenuController, render_trip_list
from .exceptions import (
    TravelPlanError,
    StoreWriteError,
    StoreCorruptedError,
    InvalidFareError,
    TripNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Trip",
    "total_fare",
    "TripStore",
    "TripField",
    "EditSession",
    "apply_field_edit",
    "delete_trip",
    "edit_trip",
    "MenuController",
    "render_trip_list",
    "TravelPlanError",
    "StoreWriteError",
    "StoreCorruptedError",
    "InvalidFareError",
    "TripNotFoundError",
]
