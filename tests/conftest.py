"""
Shared fixtures for the course catalog tests.
"""

import pytest

from course_catalog.config import SAMPLE_CATALOG_PATH, STARTUP_CATALOG_ENV, VALIDATE_ON_LOAD_ENV


EXAMPLE_LINES = [
    "CS101,Intro to CS",
    "CS201,Data Structures,CS101",
    "CS301,Algorithms,CS201,CS999",
]


class ScriptedPrompt:
    """
    Stand-in for input(): returns the scripted answers in order and raises
    EOFError once they run out, like input() at end of stdin.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    monkeypatch.delenv(STARTUP_CATALOG_ENV, raising=False)
    monkeypatch.delenv(VALIDATE_ON_LOAD_ENV, raising=False)


@pytest.fixture
def write_catalog(tmp_path):
    """Factory: write lines to a catalog file and return its path."""
    def _write(lines, name="courses.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def example_path(write_catalog):
    """The three-course example with one undefined prerequisite (CS999)."""
    return write_catalog(EXAMPLE_LINES)


@pytest.fixture
def sample_path():
    return SAMPLE_CATALOG_PATH


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt
