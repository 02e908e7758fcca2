"""Actions that routines execute step by step, plus routines and rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Sequence

from .expression import Expression
from .variables import Variable


class Action(ABC):
    """One instruction of a routine."""

    @abstractmethod
    def run(self) -> bool:
        """Execute the action; return False if the routine has to wait here."""


@dataclass(eq=False)
class AwaitCondition(Action):
    """Blocks until a boolean condition holds."""

    condition: Expression

    def run(self) -> bool:
        return self.condition.evaluate_boolean()


@dataclass(eq=False)
class AwaitRoutine(Action):
    """Starts a routine and blocks until it has finished."""

    routine: "Routine"
    _is_waiting: bool = field(default=False, init=False, repr=False)

    def run(self) -> bool:
        if not self.routine.is_running() and not self._is_waiting:
            self.routine.start()
            self._is_waiting = True
        can_proceed = not self.routine.is_running()
        if can_proceed:
            self._is_waiting = False
        return can_proceed


@dataclass(eq=False)
class MethodCall(Action):
    """Calls a method of a module with the given argument expressions."""

    module: Any
    method_name: str
    arguments: Sequence[Expression] = ()

    def run(self) -> bool:
        self.module.call_with_shadows(self.method_name, list(self.arguments))
        return True


@dataclass(eq=False)
class PropertyAssignment(Action):
    """Writes the value of an expression to a module property."""

    module: Any
    property_name: str
    expression: Expression

    def run(self) -> bool:
        self.module.write_property(self.property_name, self.expression)
        return True


@dataclass(eq=False)
class RoutineCall(Action):
    """Starts a routine without waiting for it."""

    routine: "Routine"

    def run(self) -> bool:
        self.routine.start()
        return True


@dataclass(eq=False)
class VariableAssignment(Action):
    """Assigns the value of an expression to a variable."""

    variable: Variable
    expression: Expression

    def run(self) -> bool:
        self.variable.assign(self.expression)
        return True


class Routine:
    """A sequence of actions that runs across several steps."""

    def __init__(self, actions):
        self.actions: tuple[Action, ...] = tuple(actions)
        self._index: int | None = None

    def is_running(self) -> bool:
        return self._index is not None and self._index < len(self.actions)

    def start(self) -> None:
        """Restart the routine from its first action."""
        self._index = 0

    def step(self) -> None:
        """Run actions until one has to wait or the routine finishes."""
        if not self.is_running():
            return
        while self._index < len(self.actions):
            if not self.actions[self._index].run():
                return
            self._index += 1
        self._index = None

    def __repr__(self) -> str:
        return f"Routine({len(self.actions)} actions, running={self.is_running()})"


@dataclass(frozen=True, eq=False)
class Rule:
    """A routine that is started whenever its condition holds."""

    condition: Expression
    routine: Routine