"""Beverage preparation as a fixed recipe with overridable steps."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

LOGGER = logging.getLogger(__name__)

AskCallable = Callable[[str], str]

_YES_ANSWERS = {"y", "yes"}


class Beverage(ABC):
    """Template for hot drinks.

    ``prepare_recipe`` always runs the same order: boil water, brew, pour,
    add condiments when the customer wants them, then the finishing hook.
    Subclasses must provide ``brew`` and ``add_condiments``; the condiment
    decision and the hook have defaults.
    """

    def __init__(self) -> None:
        self._steps: List[str] = []

    def prepare_recipe(self) -> List[str]:
        """Run the recipe and return the emitted step lines in order."""
        self._steps = []
        self.boil_water()
        self.brew()
        self.pour_in_cup()
        if self.customer_wants_condiments():
            self.add_condiments()
        self.after_prepare_hook()
        return list(self._steps)

    @abstractmethod
    def brew(self) -> None:
        ...

    @abstractmethod
    def add_condiments(self) -> None:
        ...

    def boil_water(self) -> None:
        self._emit("Boiling water...")

    def pour_in_cup(self) -> None:
        self._emit("Pouring into cup...")

    def customer_wants_condiments(self) -> bool:
        return True

    def after_prepare_hook(self) -> None:
        pass

    def _emit(self, line: str) -> None:
        self._steps.append(line)
        LOGGER.info("%s", line)


class _AskingBeverage(Beverage):
    """Asks the customer about condiments through ``ask``."""

    question = "Would you like condiments? (y/n): "

    def __init__(self, ask: Optional[AskCallable] = None) -> None:
        super().__init__()
        self._ask = ask or input

    def customer_wants_condiments(self) -> bool:
        try:
            answer = self._ask(self.question)
        except EOFError:
            LOGGER.debug("No answer available, assuming no condiments")
            return False
        return (answer or "").strip().lower() in _YES_ANSWERS


class Tea(_AskingBeverage):
    question = "Would you like lemon and honey with your tea? (y/n): "

    def brew(self) -> None:
        self._emit("Steeping the tea for 3 minutes...")

    def add_condiments(self) -> None:
        self._emit("Adding lemon and honey...")


class Coffee(_AskingBeverage):
    question = "Would you like milk and sugar with your coffee? (y/n): "

    def brew(self) -> None:
        self._emit("Brewing coffee in the machine...")

    def add_condiments(self) -> None:
        self._emit("Adding milk and sugar...")

    def after_prepare_hook(self) -> None:
        self._emit("Coffee is ready, enjoy!")
