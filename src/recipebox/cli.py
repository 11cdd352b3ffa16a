"""recipebox command-line interface."""

from typing import Annotated, Optional

import typer
from rich.console import Console

from . import __version__
from .commands import RecipeCommands
from .config import APP_NAME
from .display import RecipeDisplay
from .logger import get_logger
from .profile import Profile
from .prompts import ConsolePrompter
from .queries import DEFAULT_QUICK_TIME
from .reset import ResetProcedure
from .storage.recipes import RecipeStore

logger = get_logger("cli")

app = typer.Typer(
    help=f"{APP_NAME} - a command-line recipe manager",
    epilog="Examples: recipebox list | recipebox view 1 | recipebox quick 20",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    add_completion=False,
)


def build_commands() -> RecipeCommands:
    """Wire a dispatcher to the current profile's store and a real console."""
    profile = Profile.current()
    console = Console()
    logger.debug(f"Using {profile}")
    return RecipeCommands(
        store=RecipeStore.for_profile(profile),
        prompter=ConsolePrompter(console),
        display=RecipeDisplay(console),
        reset=ResetProcedure(),
    )


def _finish(exit_code: int) -> None:
    if exit_code:
        raise typer.Exit(exit_code)


@app.command("list")
def list_recipes():
    """List all recipes."""
    _finish(build_commands().list_recipes())


@app.command()
def view(recipe_id: Annotated[int, typer.Argument(help="Recipe ID")]):
    """View recipe details."""
    _finish(build_commands().view(recipe_id))


@app.command("format")
def format_recipe(recipe_id: Annotated[int, typer.Argument(help="Recipe ID")]):
    """View formatted recipe."""
    _finish(build_commands().format(recipe_id))


@app.command()
def create():
    """Create a new recipe."""
    _finish(build_commands().create())


@app.command("add-ingredient")
def add_ingredient(recipe_id: Annotated[int, typer.Argument(help="Recipe ID")]):
    """Add ingredient to a recipe."""
    _finish(build_commands().add_ingredient(recipe_id))


@app.command("add-step")
def add_step(recipe_id: Annotated[int, typer.Argument(help="Recipe ID")]):
    """Add step to a recipe."""
    _finish(build_commands().add_step(recipe_id))


@app.command("remove-step")
def remove_step(
    recipe_id: Annotated[int, typer.Argument(help="Recipe ID")],
    step_index: Annotated[Optional[int], typer.Argument(help="Step index to remove (1-based)")] = None,
):
    """Remove a step from a recipe."""
    _finish(build_commands().remove_step(recipe_id, step_index))


@app.command()
def delete(recipe_id: Annotated[int, typer.Argument(help="Recipe ID")]):
    """Delete a recipe."""
    _finish(build_commands().delete(recipe_id))


@app.command()
def quick(
    time: Annotated[int, typer.Argument(help="Maximum cooking time in minutes")] = DEFAULT_QUICK_TIME,
):
    """Find recipes that can be made quickly."""
    _finish(build_commands().quick(time))


@app.command("reset-data")
def reset_data():
    """Reset recipe data to defaults."""
    _finish(build_commands().reset_data())


@app.command()
def version():
    """Show version."""
    typer.echo(f"{APP_NAME} {__version__}")


def main():
    """Entry point for the recipebox CLI."""
    app()


if __name__ == "__main__":
    main()
