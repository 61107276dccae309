# hcs2/core/metadata.py
"""
Metadata collection for register/update/migrate messages.

The interactive loop is modelled as a two-state machine so its termination
can be tested without a terminal: pairs are accepted while COLLECTING, and a
negative answer to "add more?" moves it to DONE.
"""

import enum
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from hcs2.prompts import Prompter


class CollectorState(enum.Enum):
    COLLECTING = "collecting"
    DONE = "done"


class MetadataCollector:
    def __init__(self):
        self.state = CollectorState.COLLECTING
        self._entries: Dict[str, str] = {}

    @property
    def done(self) -> bool:
        return self.state is CollectorState.DONE

    @property
    def metadata(self) -> Dict[str, str]:
        return dict(self._entries)

    def add(self, key: str, value: str) -> None:
        """Insert a pair. A repeated key overwrites the earlier value."""
        if self.done:
            raise RuntimeError("Metadata collection already finished")
        self._entries[key] = value

    def answer_continue(self, more: bool) -> CollectorState:
        if self.done:
            raise RuntimeError("Metadata collection already finished")
        if not more:
            self.state = CollectorState.DONE
        return self.state


def collect_metadata(prompter: "Prompter") -> Dict[str, str]:
    """Ask for key/value pairs until the user declines to add more."""
    collector = MetadataCollector()
    while not collector.done:
        key = prompter.text("Enter metadata key:")
        value = prompter.text(f"Enter value for {key}:")
        collector.add(key, value)
        collector.answer_continue(
            prompter.confirm("Do you want to add more metadata?", default=False)
        )
    return collector.metadata
