"""Console rendering of recipes with rich."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import Ingredient, Recipe


def format_amount(amount: float) -> str:
    """1.0 -> "1", 1.5 -> "1.5"."""
    return f"{amount:g}"


def format_ingredient(ingredient: Ingredient) -> str:
    parts = [format_amount(ingredient.amount), ingredient.unit, ingredient.name]
    return " ".join(part for part in parts if part)


def render_recipe(recipe: Recipe) -> str:
    """Render a recipe as plain text, ready to print or paste."""
    lines = [
        recipe.name.upper(),
        "=" * len(recipe.name),
        f"Cooking time: {recipe.cooking_time} minutes",
        f"Servings: {recipe.servings}",
        "",
        "INGREDIENTS:",
    ]
    if recipe.ingredients:
        lines.extend(f"  - {format_ingredient(i)}" for i in recipe.ingredients)
    else:
        lines.append("  (none)")

    lines.extend(["", "STEPS:"])
    if recipe.steps:
        lines.extend(f"  {number}. {step}" for number, step in enumerate(recipe.steps, start=1))
    else:
        lines.append("  (none)")

    return "\n".join(lines)


class RecipeDisplay:
    """Writes recipes and status messages to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def recipe_list(self, recipes: List[Recipe]) -> None:
        if not recipes:
            self.warning("No recipes found.")
            return

        table = Table(title="Recipes", show_header=True, header_style="bold blue")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Time (min)", justify="right")
        table.add_column("Servings", justify="right")
        for recipe in recipes:
            table.add_row(str(recipe.id), escape(recipe.name), str(recipe.cooking_time), str(recipe.servings))
        self.console.print(table)

    def recipe_details(self, recipe: Recipe) -> None:
        """Show every field of a recipe."""
        summary = Table.grid(padding=(0, 2))
        summary.add_column(style="cyan")
        summary.add_column()
        summary.add_row("ID", str(recipe.id))
        summary.add_row("Cooking time", f"{recipe.cooking_time} minutes")
        summary.add_row("Servings", str(recipe.servings))
        self.console.print(Panel(summary, title=f"[bold]{escape(recipe.name)}[/bold]", border_style="cyan", expand=False))

        self.console.print("[bold]Ingredients:[/bold]")
        if recipe.ingredients:
            for ingredient in recipe.ingredients:
                self.console.print(f"  • {escape(format_ingredient(ingredient))}")
        else:
            self.console.print("  [dim]No ingredients yet[/dim]")

        self.console.print("[bold]Steps:[/bold]")
        if recipe.steps:
            self.steps(recipe, indent="  ")
        else:
            self.console.print("  [dim]No steps yet[/dim]")

    def formatted_recipe(self, recipe: Recipe) -> None:
        self.console.print(Panel(escape(render_recipe(recipe)), border_style="green", expand=False))

    def steps(self, recipe: Recipe, indent: str = "") -> None:
        for number, step in enumerate(recipe.steps, start=1):
            self.console.print(f"{indent}{number}. {escape(step)}")

    def quick_recipes(self, recipes: List[Recipe], max_time: int) -> None:
        if not recipes:
            self.warning(f"No quick recipes found under {max_time} minutes")
            return

        self.console.print(f"[green]Found {len(recipes)} quick recipes under {max_time} minutes:[/green]")
        for recipe in recipes:
            self.console.print(f"{escape(recipe.name)} - {recipe.cooking_time} minutes")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗ {escape(message)}[/red]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{escape(message)}[/cyan]")
