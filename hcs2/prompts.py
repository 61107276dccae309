# hcs2/prompts.py
"""
Terminal prompts.

Flows depend on the small ``Prompter`` interface; ``RichPrompter`` is the
interactive implementation. Validators return ``None`` to accept a value or a
message to print before asking again.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from hcs2.core.validators import INVALID_NUMBER

Validator = Callable[[str], Optional[str]]
Choice = Tuple[str, str]   # (label, value)


class Prompter(ABC):

    @abstractmethod
    def text(self, message: str, *, default: Optional[str] = None,
             validate: Optional[Validator] = None) -> str:
        pass

    @abstractmethod
    def integer(self, message: str, *, default: Optional[int] = None,
                validate: Optional[Validator] = None) -> int:
        pass

    @abstractmethod
    def confirm(self, message: str, *, default: bool = False) -> bool:
        pass

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice]) -> str:
        """Return the value of the chosen entry."""


class RichPrompter(Prompter):
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _ask(self, message: str, default: Optional[str], validate: Optional[Validator]) -> str:
        while True:
            if default is None:
                value = Prompt.ask(escape(message), console=self.console)
            else:
                value = Prompt.ask(
                    escape(message),
                    console=self.console,
                    default=default,
                    show_default=bool(default),
                )
            error = validate(value) if validate else None
            if error is None:
                return value
            self.console.print(f"[prompt.invalid]{escape(error)}")

    def text(self, message, *, default=None, validate=None):
        return self._ask(message, default, validate)

    def integer(self, message, *, default=None, validate=None):
        def check(value: str) -> Optional[str]:
            try:
                int(value.strip())
            except ValueError:
                return INVALID_NUMBER
            return validate(value) if validate else None

        value = self._ask(message, None if default is None else str(default), check)
        return int(value.strip())

    def confirm(self, message, *, default=False):
        return Confirm.ask(escape(message), console=self.console, default=default)

    def select(self, message, choices):
        for index, (label, value) in enumerate(choices, start=1):
            self.console.print(f"  {index}. {escape(label)} ({escape(value)})")

        values = [value for _, value in choices]
        by_number = {str(i): value for i, value in enumerate(values, start=1)}

        def check(answer: str) -> Optional[str]:
            if answer in values or answer in by_number:
                return None
            return f"Please choose one of: {', '.join(values)}"

        answer = self._ask(message, None, check)
        return by_number.get(answer, answer)
