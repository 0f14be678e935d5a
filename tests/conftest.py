"""
Shared fixtures for the duelsim tests
"""
import io
import pytest
from rich.console import Console

from duelsim.game import GameLogic
from duelsim.models import Config


class ScriptedRandom:
    """Random source that returns the element at each scripted index in turn"""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        index = self.indices[self.calls]
        self.calls += 1
        return seq[index]


@pytest.fixture
def console():
    """Console that writes into a buffer instead of the terminal"""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def output(console):
    """Read back everything printed to the captured console"""
    return lambda: console.file.getvalue()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def logic(console):
    return GameLogic(ScriptedRandom([]), console)


@pytest.fixture
def write_settings(tmp_path):
    """Write a YAML settings file and return its path"""
    def _write(text):
        path = tmp_path / "settings.yaml"
        path.write_text(text)
        return str(path)
    return _write
