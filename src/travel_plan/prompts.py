"""
Interactive prompt primitives.

The menu and the trip editor only talk to a ``PromptProvider``; the console
implementation below is what the CLI wires in, tests use a scripted one.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from travel_plan.models import parse_fare


class PromptProvider(ABC):
    """Blocking user-input primitives consumed by the menu and editor."""

    @abstractmethod
    def text(self, prompt: str) -> str: ...

    @abstractmethod
    def integer(self, prompt: str) -> int:
        """Read an unsigned integer; raises InvalidFareError on bad input."""

    @abstractmethod
    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        """Return the zero-based index of the chosen option."""

    @abstractmethod
    def confirm(self, prompt: str, default: bool = False) -> bool: ...

    def show(self, message: str = "") -> None:
        """Display an informational line."""
        print(message)


class ConsolePrompt(PromptProvider):
    """PromptProvider reading from stdin and writing to stdout."""

    YES = {"y", "yes"}
    NO = {"n", "no"}

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
    ):
        self._input = input_func or input
        self._output = output_func or print

    def show(self, message: str = "") -> None:
        self._output(message)

    def text(self, prompt: str) -> str:
        return self._input(f"{prompt}: ").strip()

    def integer(self, prompt: str) -> int:
        return parse_fare(self._input(f"{prompt}: "))

    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        if not options:
            raise ValueError("select() needs at least one option")

        self._output(f"{prompt}:")
        for number, option in enumerate(options, 1):
            marker = ">" if number - 1 == default else " "
            self._output(f" {marker} {number}) {option}")

        while True:
            answer = self._input(f"Choice [{default + 1}]: ").strip()
            if not answer:
                return default
            if answer.isdecimal() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            self._output(f"Please enter a number between 1 and {len(options)}.")

    def confirm(self, prompt: str, default: bool = False) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self._input(f"{prompt} [{hint}]: ").strip().lower()
            if not answer:
                return default
            if answer in self.YES:
                return True
            if answer in self.NO:
                return False
            self._output("Please answer 'y' or 'n'.")
