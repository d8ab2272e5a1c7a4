"""
Record store for the trip collection.

The whole collection lives in one pretty-printed JSON document. Every read
loads the complete list and every write replaces the complete file; trip
logs are small enough that nothing smarter is needed.
"""

import json
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from travel_plan.exceptions import (
    StoreCorruptedError,
    StoreWriteError,
    TripNotFoundError,
)
from travel_plan.logging import get_logger
from travel_plan.models import Trip, TripList

logger = get_logger(__name__)

EMPTY_DOCUMENT = "[]"


class TripStore:
    """
    Load and save the complete trip collection.

    Positions accepted by ``replace`` are 1-based, matching
    what the user sees in listings and selection menus.
    """

    def __init__(self, path: Union[str, Path], strict: bool = False):
        """
        Initialize the store.

        Args:
            path: Location of the JSON document
            strict: Raise StoreCorruptedError on an unparseable document
                    instead of loading it as an empty collection
        """
        self.path = Path(path)
        self.strict = strict

    def _read_document(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No trip file at {self.path}, starting empty")
            return EMPTY_DOCUMENT
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read trip file {self.path}: {e}")
            return EMPTY_DOCUMENT

    def load(self) -> List[Trip]:
        """
        Load the full trip collection.

        Returns:
            List of trips in saved order (empty if the file is missing or
            cannot be parsed and strict mode is off)

        Raises:
            StoreCorruptedError: If the document cannot be parsed in strict mode
        """
        data = self._read_document()
        try:
            trips = TripList.validate_python(json.loads(data))
        except (json.JSONDecodeError, ValidationError) as e:
            if self.strict:
                raise StoreCorruptedError(f"Could not parse {self.path}: {e}") from e
            logger.warning(f"Ignoring unparseable trip file {self.path}: {e}")
            return []

        logger.debug(f"Loaded {len(trips)} trip(s) from {self.path}")
        return trips

    def save(self, trips: List[Trip]) -> None:
        """
        Overwrite the document with the full trip collection.

        Args:
            trips: Complete collection to persist

        Raises:
            StoreWriteError: If the file cannot be written
        """
        payload = json.dumps(
            [trip.to_dict() for trip in trips],
            ensure_ascii=False,
            indent=2,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
        except OSError as e:
            raise StoreWriteError(f"Could not write {self.path}: {e}") from e

        logger.debug(f"Saved {len(trips)} trip(s) to {self.path}")

    def append(self, trip: Trip) -> List[Trip]:
        """Add a trip to the end of the saved collection."""
        trips = self.load()
        trips.append(trip)
        self.save(trips)
        logger.info(f"Added trip #{len(trips)}: {trip.departure_station} → {trip.arrival_station}")
        return trips

    def replace(self, position: int, trip: Trip) -> List[Trip]:
        """Overwrite the trip at a 1-based position in a freshly loaded collection."""
        trips = self.load()
        check_position(trips, position)
        trips[position - 1] = trip
        self.save(trips)
        logger.info(f"Updated trip #{position}")
        return trips


def check_position(trips: List[Trip], position: int) -> None:
    """
    Make sure a 1-based position addresses an existing trip.

    Raises:
        TripNotFoundError: If the position is out of range
    """
    if not 1 <= position <= len(trips):
        raise TripNotFoundError(
            f"Trip #{position} does not exist (collection has {len(trips)} trip(s))"
        )
