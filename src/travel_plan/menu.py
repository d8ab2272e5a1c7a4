"""
Top-level interactive menu.

The controller holds no trip state of its own: every action loads the
collection through the store, and only this layer turns TravelPlanError
into a message for the user before returning to the menu.
"""

from enum import IntEnum
from typing import List, Optional

from travel_plan.config import AppConfig, get_config
from travel_plan.editor import NO_TRIPS_MESSAGE, TripField, edit_trip
from travel_plan.exceptions import TravelPlanError
from travel_plan.logging import LogContext, get_logger
from travel_plan.models import Trip, total_fare
from travel_plan.prompts import PromptProvider
from travel_plan.store import TripStore

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


class MenuAction(IntEnum):
    ADD = 0
    EDIT = 1
    LIST = 2
    QUIT = 3


MENU_OPTIONS = {
    MenuAction.ADD: "Add a trip",
    MenuAction.EDIT: "Edit a trip",
    MenuAction.LIST: "Show saved trips",
    MenuAction.QUIT: "Quit",
}


def render_trip_list(trips: List[Trip], currency_symbol: str = "¥") -> List[str]:
    """
    Format the trip listing.

    Returns:
        One line per trip in collection order, then a blank line and the
        fare total; a single "no trips" line for an empty collection
    """
    if not trips:
        return [NO_TRIPS_MESSAGE]

    lines = [
        trip.summary_line(position, currency_symbol)
        for position, trip in enumerate(trips, 1)
    ]
    lines.append("")
    lines.append(f"Total fare: {currency_symbol}{total_fare(trips)}")
    return lines


class MenuController:
    """Add/edit/list/quit loop over a TripStore."""

    TITLE = "Travel Plan Manager"

    def __init__(
        self,
        store: TripStore,
        prompt: PromptProvider,
        config: Optional[AppConfig] = None,
    ):
        self.store = store
        self.prompt = prompt
        self.config = config or get_config()

    def run(self) -> int:
        """
        Run the menu until the user quits.

        Returns:
            Process exit status
        """
        try:
            while True:
                self.prompt.show()
                self.prompt.show(self.TITLE)
                choice = MenuAction(
                    self.prompt.select("Choose an action", list(MENU_OPTIONS.values()))
                )
                if choice is MenuAction.QUIT:
                    break
                self.dispatch(choice)
        except EOFError:
            logger.info("Input closed, leaving the menu")
            self.prompt.show()
        except KeyboardInterrupt:
            logger.info("Interrupted, leaving the menu")
            self.prompt.show()
            return EXIT_INTERRUPTED

        self.prompt.show("Goodbye.")
        return EXIT_OK

    def dispatch(self, action: MenuAction) -> None:
        """Run one menu action, reporting travel plan errors instead of raising."""
        handlers = {
            MenuAction.ADD: self.add_trip,
            MenuAction.EDIT: self.edit_trip,
            MenuAction.LIST: self.list_trips,
        }
        try:
            with LogContext(action.name.lower(), data_file=self.store.path):
                handlers[action]()
        except TravelPlanError as e:
            self.prompt.show(f"Error: {e.user_message}")

    def add_trip(self) -> Trip:
        """Prompt for every field of a new trip and append it to the store."""
        values = {}
        for field in TripField:
            if field is TripField.FARE:
                values[field.value] = self.prompt.integer(field.prompt)
            else:
                values[field.value] = self.prompt.text(field.prompt)

        trip = Trip(**values)
        self.store.append(trip)
        self.prompt.show("Trip saved.")
        return trip

    def edit_trip(self) -> None:
        edit_trip(self.store, self.prompt)

    def list_trips(self) -> List[str]:
        """Print every saved trip followed by the fare total."""
        lines = render_trip_list(self.store.load(), self.config.currency_symbol)
        for line in lines:
            self.prompt.show(line)
        return lines
