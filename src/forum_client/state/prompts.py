"""User interaction seam for confirmations and one-shot alerts."""

import logging

from typing import Protocol

logger = logging.getLogger(__name__)


class UserPrompts(Protocol):
    """Blocking questions and notices the controllers need from the user."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; True means proceed."""
        ...

    def alert(self, message: str) -> None:
        """Show a one-shot notice."""
        ...


class ScriptedPrompts:
    """UserPrompts that answers confirmations with a fixed value.

    Every question and alert is recorded, which makes it suitable for scripts
    and tests.
    """

    def __init__(self, confirm_result: bool = True):
        self.confirm_result = confirm_result
        self.confirmations: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        logger.info(f"Confirm: {message} -> {'yes' if self.confirm_result else 'no'}")
        return self.confirm_result

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        logger.warning(f"Alert: {message}")
