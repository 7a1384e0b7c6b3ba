"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Iterable
from pathlib import Path

import pytest


class ScriptedRandom:
    """
    Random source that replays a fixed list of draws.

    Fails the test if a draw is out of range or the script runs out, so
    tests also pin down how many draws a generator takes.
    """

    def __init__(self, draws: Iterable[int]):
        self.draws = list(draws)
        self.taken: list[tuple[int, int]] = []

    def randrange(self, stop: int) -> int:
        assert self.draws, f"Unexpected draw (randrange({stop})) after {len(self.taken)} draws"
        value = self.draws.pop(0)
        assert 0 <= value < stop, f"Scripted draw {value} outside [0, {stop})"
        self.taken.append((value, stop))
        return value

    @property
    def exhausted(self) -> bool:
        return not self.draws


@pytest.fixture
def scripted():
    """Factory for scripted random sources: scripted(10, 30, 1)."""

    def make(*draws: int) -> ScriptedRandom:
        return ScriptedRandom(draws)

    return make


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in preset library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_composer" / "presets" / "library"
