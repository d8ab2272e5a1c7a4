"""Data models for saved trips."""

import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from travel_plan.exceptions import InvalidFareError

FARE_PATTERN = re.compile(r"\+?[0-9]+")


class Trip(BaseModel):
    """One leg of a travel plan: a single train ride with its fare."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    departure_time: str = Field(description="Departure time, intended HH:MM")
    departure_station: str = Field(description="Station the ride starts from")
    line: str = Field(description="Railway line name")
    train_type: str = Field(description="Train type (e.g., Local, Rapid, Limited Express)")
    destination: str = Field(description="Final destination shown on the train")
    fare: int = Field(ge=0, description="Fare in whole currency units")
    arrival_time: str = Field(description="Arrival time, intended HH:MM")
    arrival_station: str = Field(description="Station the ride ends at")

    def label(self, position: int) -> str:
        """Short label used when picking a trip to edit."""
        return f"{position}. {self.departure_station} → {self.arrival_station}"

    def summary_line(self, position: int, currency_symbol: str = "¥") -> str:
        """Full one-line description used by the trip listing."""
        return (
            f"{position}. {self.departure_time} {self.departure_station} → "
            f"{self.arrival_time} {self.arrival_station} "
            f"({self.line} Line, {self.train_type}, bound for {self.destination}, "
            f"{currency_symbol}{self.fare})"
        )

    def to_dict(self) -> dict:
        """Convert to the plain dictionary written to the trip file."""
        return self.model_dump(mode="json")


# Validates the whole persisted document in one pass
TripList = TypeAdapter(List[Trip])


def total_fare(trips: List[Trip]) -> int:
    """Sum of all fares in the collection."""
    return sum(trip.fare for trip in trips)


def parse_fare(text: str) -> int:
    """
    Coerce user-entered text to an unsigned integer fare.

    Raises:
        InvalidFareError: If the text is not a whole number of 0 or more
    """
    cleaned = text.strip()
    if not FARE_PATTERN.fullmatch(cleaned):
        raise InvalidFareError(f"Invalid fare: {text!r}")
    return int(cleaned)
