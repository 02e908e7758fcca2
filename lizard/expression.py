"""Base class of all typed Lizard expressions."""

from __future__ import annotations

from .errors import LizardError
from .variables import Type


class Expression:
    """A typed expression; subclasses override the evaluations their type supports."""

    def __init__(self, type):
        self.type = Type(type)

    def evaluate_boolean(self) -> bool:
        raise LizardError("expression cannot evaluate to a boolean")

    def evaluate_integer(self) -> int:
        return 1 if self.evaluate_boolean() else 0

    def evaluate_number(self) -> float:
        return float(self.evaluate_integer())

    def evaluate_string(self) -> str:
        raise LizardError("expression cannot evaluate to a string")

    def evaluate_identifier(self) -> str:
        raise LizardError("expression cannot evaluate to an identifier")

    def is_numbery(self) -> bool:
        """True for numbers, integers and booleans."""
        return self.type in (Type.NUMBER, Type.INTEGER, Type.BOOLEAN)

    def format(self) -> str:
        """Return the value as the interpreter prints it."""
        if self.type == Type.BOOLEAN:
            return "true" if self.evaluate_boolean() else "false"
        if self.type == Type.INTEGER:
            return str(self.evaluate_integer())
        if self.type == Type.NUMBER:
            return f"{self.evaluate_number():f}"
        if self.type == Type.STRING:
            return f'"{self.evaluate_string()}"'
        if self.type == Type.IDENTIFIER:
            return self.evaluate_identifier()
        raise LizardError("expression has an invalid datatype")