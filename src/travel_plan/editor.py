"""
Field-level editing and deletion of saved trips.

An edit session works on one trip, addressed by its 1-based position. Each
accepted field edit is written straight away: the collection is reloaded
from disk, the edited position is overwritten, and the whole collection is
saved again. Nothing is batched across menu choices.
"""

from enum import Enum
from typing import List, Optional

from travel_plan.exceptions import TripNotFoundError
from travel_plan.logging import get_logger
from travel_plan.models import Trip, parse_fare
from travel_plan.prompts import PromptProvider
from travel_plan.store import TripStore, check_position

logger = get_logger(__name__)

NO_TRIPS_MESSAGE = "No saved trips."


class TripField(str, Enum):
    """Editable trip fields, in display order."""

    DEPARTURE_TIME = "departure_time"
    DEPARTURE_STATION = "departure_station"
    LINE = "line"
    TRAIN_TYPE = "train_type"
    DESTINATION = "destination"
    FARE = "fare"
    ARRIVAL_TIME = "arrival_time"
    ARRIVAL_STATION = "arrival_station"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def prompt(self) -> str:
        """Prompt text for entering this field's value."""
        if self in (TripField.DEPARTURE_TIME, TripField.ARRIVAL_TIME):
            return f"{self.label} (HH:MM)"
        return self.label


FIELD_LABELS = {
    TripField.DEPARTURE_TIME: "Departure time",
    TripField.DEPARTURE_STATION: "Departure station",
    TripField.LINE: "Line",
    TripField.TRAIN_TYPE: "Train type",
    TripField.DESTINATION: "Destination",
    TripField.FARE: "Fare",
    TripField.ARRIVAL_TIME: "Arrival time",
    TripField.ARRIVAL_STATION: "Arrival station",
}


class EditState(Enum):
    EDITING = "editing"
    CONFIRMING_DELETE = "confirming_delete"
    DONE = "done"


class EditOutcome(Enum):
    FINISHED = "finished"
    DELETED = "deleted"


def apply_field_edit(trip: Trip, field: TripField, new_value: str) -> Trip:
    """
    Return a copy of ``trip`` with exactly one field replaced.

    Args:
        trip: Trip to edit (left untouched)
        field: Field to replace
        new_value: User-entered text; coerced to an integer for the fare

    Returns:
        The edited copy

    Raises:
        InvalidFareError: If the fare text is not an unsigned integer
    """
    field = TripField(field)
    value = parse_fare(new_value) if field is TripField.FARE else new_value
    return trip.model_copy(update={field.value: value})


def delete_trip(trips: List[Trip], position: int) -> List[Trip]:
    """Return a new collection without the trip at the 1-based ``position``."""
    check_position(trips, position)
    return trips[:position - 1] + trips[position:]


class EditSession:
    """
    Interactive editing of one saved trip.

    States: EDITING loops over field edits; choosing "Delete" moves to
    CONFIRMING_DELETE, which either returns to EDITING (declined) or ends
    the session (confirmed); "Finish" ends the session directly.
    """

    DELETE_OPTION = "Delete this trip"
    FINISH_OPTION = "Finish editing"

    def __init__(self, store: TripStore, prompt: PromptProvider, position: int):
        self.store = store
        self.prompt = prompt
        self.position = position
        self.state = EditState.EDITING
        self.outcome: Optional[EditOutcome] = None

        trips = store.load()
        check_position(trips, position)
        self.trip = trips[position - 1]

    @property
    def options(self) -> List[str]:
        return [f"Edit {field.label.lower()}" for field in TripField] + [
            self.DELETE_OPTION,
            self.FINISH_OPTION,
        ]

    def run(self) -> EditOutcome:
        """Drive the session until it reaches DONE."""
        while self.state is not EditState.DONE:
            if self.state is EditState.EDITING:
                self._editing()
            else:
                self._confirming_delete()
        return self.outcome

    def _editing(self) -> None:
        fields = list(TripField)
        choice = self.prompt.select("Choose what to edit", self.options)

        if choice < len(fields):
            self.edit_field(fields[choice])
        elif choice == len(fields):
            self.state = EditState.CONFIRMING_DELETE
        else:
            self.outcome = EditOutcome.FINISHED
            self.state = EditState.DONE

    def _confirming_delete(self) -> None:
        if self.prompt.confirm("Really delete this trip?", default=False):
            trips = delete_trip(self.store.load(), self.position)
            self.store.save(trips)
            logger.info(f"Deleted trip #{self.position}, {len(trips)} left")
            self.prompt.show("Trip deleted.")
            self.outcome = EditOutcome.DELETED
            self.state = EditState.DONE
        else:
            logger.debug(f"Delete of trip #{self.position} declined")
            self.state = EditState.EDITING

    def edit_field(self, field: TripField) -> Trip:
        """Ask for a new value, apply it and persist the trip immediately."""
        prompt_text = f"New {field.prompt[0].lower()}{field.prompt[1:]}"
        if field is TripField.FARE:
            new_value = str(self.prompt.integer(prompt_text))
        else:
            new_value = self.prompt.text(prompt_text)

        self.trip = apply_field_edit(self.trip, field, new_value)
        self.store.replace(self.position, self.trip)
        logger.info(f"Trip #{self.position}: {field.value} changed")
        self.prompt.show("Changes saved.")
        return self.trip


def edit_trip(store: TripStore, prompt: PromptProvider) -> Optional[EditOutcome]:
    """
    Let the user pick a saved trip and run an edit session on it.

    Returns:
        The session outcome, or None if there was nothing to edit
    """
    trips = store.load()
    if not trips:
        prompt.show(NO_TRIPS_MESSAGE)
        return None

    labels = [trip.label(position) for position, trip in enumerate(trips, 1)]
    index = prompt.select("Choose a trip to edit", labels)
    if not 0 <= index < len(trips):
        raise TripNotFoundError(f"Selection {index} is outside the trip list")

    return EditSession(store, prompt, index + 1).run()
