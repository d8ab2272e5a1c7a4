"""Shared test fixtures for the travel plan manager."""

import os
from typing import List, Sequence

import pytest

from travel_plan.config import reset_config
from travel_plan.models import Trip, parse_fare
from travel_plan.prompts import PromptProvider
from travel_plan.store import TripStore


class ScriptedPrompt(PromptProvider):
    """
    PromptProvider that replays canned answers.

    Answers are consumed in order by whichever primitive is called next;
    running out raises EOFError, like closing stdin would.
    """

    def __init__(self, answers: Sequence = ()):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def _next(self, prompt: str):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError(prompt)
        return self.answers.pop(0)

    def show(self, message: str = "") -> None:
        self.output.append(message)

    def text(self, prompt: str) -> str:
        return str(self._next(prompt))

    def integer(self, prompt: str) -> int:
        return parse_fare(str(self._next(prompt)))

    def select(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        return int(self._next(prompt))

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return bool(self._next(prompt))


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real trip file, .env and TRAVEL_PLAN_* variables."""
    for key in list(os.environ):
        if key.startswith("TRAVEL_PLAN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def store(tmp_path) -> TripStore:
    return TripStore(tmp_path / "travel_plan.json")


@pytest.fixture
def tokyo_trip() -> Trip:
    return Trip(
        departure_time="08:00",
        departure_station="Tokyo",
        line="Yamanote",
        train_type="Local",
        destination="Shinjuku",
        fare=150,
        arrival_time="08:20",
        arrival_station="Shinjuku",
    )


@pytest.fixture
def osaka_trip() -> Trip:
    return Trip(
        departure_time="09:10",
        departure_station="Osaka",
        line="JR Kyoto",
        train_type="Special Rapid",
        destination="Kyoto",
        fare=320,
        arrival_time="09:40",
        arrival_station="Kyoto",
    )


@pytest.fixture
def two_trip_store(store, tokyo_trip, osaka_trip) -> TripStore:
    store.save([tokyo_trip, osaka_trip])
    return store


@pytest.fixture
def scripted_prompt():
    """Factory for ScriptedPrompt: ``scripted_prompt([answers...])``."""
    return ScriptedPrompt
