"""Interactive input for the mutating commands."""

from typing import Optional, Protocol

from pydantic import BaseModel
from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt


class RecipeInfo(BaseModel):
    name: str
    cooking_time: int
    servings: int


class IngredientInfo(BaseModel):
    name: str
    amount: float
    unit: str = ""


class Prompter(Protocol):
    """What the command dispatcher needs from an interactive user."""

    def recipe_info(self) -> RecipeInfo: ...

    def ingredient(self) -> IngredientInfo: ...

    def step(self) -> str: ...

    def step_index(self, step_count: int) -> int:
        """Ask for a 1-based step number, return it zero-based."""
        ...

    def confirm(self, message: str) -> bool: ...


class ConsolePrompter:
    """Prompter backed by rich.prompt; re-asks until answers are valid."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _text(self, question: str, allow_empty: bool = False) -> str:
        while True:
            answer = Prompt.ask(question, console=self.console, default="" if allow_empty else ...)
            if allow_empty or answer.strip():
                return answer.strip()
            self.console.print("[red]Please enter a value[/red]")

    def _int(self, question: str, minimum: int, default: Optional[int] = None) -> int:
        while True:
            answer = IntPrompt.ask(question, console=self.console, default=default if default is not None else ...)
            if answer >= minimum:
                return answer
            self.console.print(f"[red]Please enter a number of at least {minimum}[/red]")

    def recipe_info(self) -> RecipeInfo:
        return RecipeInfo(
            name=self._text("Recipe name"),
            cooking_time=self._int("Cooking time (minutes)", minimum=0),
            servings=self._int("Servings", minimum=1, default=1),
        )

    def ingredient(self) -> IngredientInfo:
        name = self._text("Ingredient name")
        amount = FloatPrompt.ask("Amount", console=self.console)
        unit = self._text("Unit (e.g. cups, g, tbsp)", allow_empty=True)
        return IngredientInfo(name=name, amount=amount, unit=unit)

    def step(self) -> str:
        return self._text("Step instruction")

    def step_index(self, step_count: int) -> int:
        while True:
            number = IntPrompt.ask(f"Step number to remove (1-{step_count})", console=self.console)
            if 1 <= number <= step_count:
                return number - 1
            self.console.print(f"[red]Please enter a number between 1 and {step_count}[/red]")

    def confirm(self, message: str) -> bool:
        return Confirm.ask(message, console=self.console, default=False)
