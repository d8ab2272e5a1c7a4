"""
Tests for the console prompt provider.

Tests:
1. Text answers are stripped
2. Integer prompts coerce or fail without retrying
3. Selection re-asks on bad input and honours the default
4. Confirmation accepts y/yes/n/no and falls back to the default
"""

import pytest

from travel_plan.exceptions import InvalidFareError
from travel_plan.prompts import ConsolePrompt


class FakeConsole:
    """Feeds canned lines to ConsolePrompt and captures what it prints."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.asked = []
        self.printed = []

    def input(self, prompt):
        self.asked.append(prompt)
        return self.lines.pop(0)

    def print(self, message=""):
        self.printed.append(message)

    def prompt(self):
        return ConsolePrompt(input_func=self.input, output_func=self.print)


def test_text_strips_whitespace():
    console = FakeConsole("  Shinjuku  ")

    assert console.prompt().text("Destination") == "Shinjuku"
    assert console.asked == ["Destination: "]


def test_integer_parses_unsigned_numbers():
    assert FakeConsole(" 470 ").prompt().integer("Fare") == 470


@pytest.mark.parametrize("answer", ["abc", "-20", "", "3.5"])
def test_integer_fails_without_retry(answer):
    console = FakeConsole(answer, "100")

    with pytest.raises(InvalidFareError):
        console.prompt().integer("Fare")
    assert console.lines == ["100"]


def test_select_lists_options_numbered_from_one():
    console = FakeConsole("2")

    index = console.prompt().select("Choose an action", ["Add", "Edit", "Quit"])

    assert index == 1
    assert console.printed == ["Choose an action:", " > 1) Add", "   2) Edit", "   3) Quit"]


def test_select_empty_answer_picks_default():
    assert FakeConsole("").prompt().select("Pick", ["a", "b"], default=1) == 1


def test_select_asks_again_on_bad_choice():
    console = FakeConsole("0", "x", "4", "3")

    assert console.prompt().select("Pick", ["a", "b", "c"]) == 2
    assert console.printed.count("Please enter a number between 1 and 3.") == 3


def test_select_asks_again_on_non_decimal_digits():
    console = FakeConsole("²", "1")

    assert console.prompt().select("Pick", ["a", "b", "c"]) == 0
    assert console.printed[-1] == "Please enter a number between 1 and 3."


def test_select_needs_options():
    with pytest.raises(ValueError):
        FakeConsole().prompt().select("Pick", [])


@pytest.mark.parametrize("answer, expected", [
    ("y", True),
    ("YES", True),
    ("n", False),
    ("No", False),
    ("", False),
])
def test_confirm_answers(answer, expected):
    assert FakeConsole(answer).prompt().confirm("Really delete this trip?") is expected


def test_confirm_default_and_retry():
    console = FakeConsole("maybe", "")

    assert console.prompt().confirm("Sure?", default=True) is True
    assert console.asked == ["Sure? [Y/n]: ", "Sure? [Y/n]: "]
    assert console.printed == ["Please answer 'y' or 'n'."]


def test_show_prints_message():
    console = FakeConsole()
    console.prompt().show("Trip saved.")

    assert console.printed == ["Trip saved."]
