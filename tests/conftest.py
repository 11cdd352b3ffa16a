import os
import tempfile

# Keep import-time logging and profile setup out of the project's data dir
os.environ["RECIPEBOX_DATA_DIR"] = tempfile.mkdtemp(prefix="recipebox-tests-")

import pytest
from rich.console import Console

from recipebox.commands import RecipeCommands
from recipebox.display import RecipeDisplay
from recipebox.models import add_step, create_recipe
from recipebox.profile import Profile
from recipebox.storage.recipes import RecipeStore


class FakePrompter:
    """Prompter that replays scripted answers and records what was asked."""

    def __init__(self):
        self.info = None
        self.ingredient_info = None
        self.instruction = None
        self.index = None
        self.confirmed = True
        self.asked = []

    def recipe_info(self):
        self.asked.append("recipe_info")
        return self.info

    def ingredient(self):
        self.asked.append("ingredient")
        return self.ingredient_info

    def step(self):
        self.asked.append("step")
        return self.instruction

    def step_index(self, step_count):
        self.asked.append(("step_index", step_count))
        return self.index

    def confirm(self, message):
        self.asked.append(("confirm", message))
        return self.confirmed


class FakeReset:
    def __init__(self, error=None):
        self.error = error
        self.calls = 0

    def run(self):
        self.calls += 1
        if self.error:
            raise self.error


@pytest.fixture
def profile(tmp_path, monkeypatch):
    data_dir = tmp_path / "data"
    monkeypatch.setenv("RECIPEBOX_DATA_DIR", str(data_dir))
    return Profile()


@pytest.fixture
def store(profile):
    return RecipeStore.for_profile(profile)


@pytest.fixture
def console():
    return Console(record=True, width=120, color_system=None)


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def reset():
    return FakeReset()


@pytest.fixture
def commands(store, prompter, console, reset):
    return RecipeCommands(store, prompter, RecipeDisplay(console), reset)


@pytest.fixture
def output(console):
    """Text printed to the recording console so far."""
    return lambda: console.export_text(clear=False)


@pytest.fixture
def pancakes(store):
    recipe = create_recipe("Pancakes", 20, 4)
    for step in ["Mix", "Rest", "Fry"]:
        add_step(recipe, step)
    return store.create(recipe)
