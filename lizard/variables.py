"""Data types and typed variables of the Lizard language."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .errors import LizardError


class Type(IntEnum):
    """Data type of a variable or expression."""

    BOOLEAN = 1
    INTEGER = 2
    NUMBER = 4
    NUMBERY = 6
    STRING = 8
    IDENTIFIER = 16


_DEFAULTS: dict[Type, Any] = {
    Type.BOOLEAN: False,
    Type.INTEGER: 0,
    Type.NUMBER: 0.0,
    Type.STRING: "",
    Type.IDENTIFIER: "",
}


def _format_value(type_: Type, value: Any, what: str) -> str:
    if type_ == Type.BOOLEAN:
        return "true" if value else "false"
    if type_ == Type.INTEGER:
        return str(int(value))
    if type_ == Type.NUMBER:
        return f"{float(value):f}"
    if type_ == Type.STRING:
        return f'"{value}"'
    if type_ == Type.IDENTIFIER:
        return str(value)
    raise LizardError(f"{what} has an invalid datatype")


class Variable:
    """A named storage cell holding a value of one fixed type."""

    def __init__(self, type):
        self.type = Type(type)
        self.value = _DEFAULTS.get(self.type)

    def assign(self, expression) -> None:
        """Store the value of ``expression``, which must have a compatible type."""
        if self.type == Type.BOOLEAN and expression.type == Type.BOOLEAN:
            self.value = expression.evaluate_boolean()
        elif self.type == Type.INTEGER and expression.type == Type.INTEGER:
            self.value = expression.evaluate_integer()
        elif self.type == Type.NUMBER and expression.is_numbery():
            self.value = expression.evaluate_number()
        elif self.type == Type.STRING and expression.type == Type.STRING:
            self.value = expression.evaluate_string()
        elif self.type == Type.IDENTIFIER and expression.type == Type.IDENTIFIER:
            raise LizardError("assignment of identifiers is forbidden")
        else:
            raise LizardError("type mismatch for variable assignment")

    def format(self) -> str:
        """Return the value as the interpreter prints it."""
        return _format_value(self.type, self.value, "variable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class BooleanVariable(Variable):
    """Variable of type boolean."""

    def __init__(self, value=False):
        super().__init__(Type.BOOLEAN)
        self.value = bool(value)


class IntegerVariable(Variable):
    """Variable of type integer."""

    def __init__(self, value=0):
        super().__init__(Type.INTEGER)
        self.value = int(value)


class NumberVariable(Variable):
    """Variable of type number (floating point)."""

    def __init__(self, value=0.0):
        super().__init__(Type.NUMBER)
        self.value = float(value)


class StringVariable(Variable):
    """Variable of type string."""

    def __init__(self, value=""):
        super().__init__(Type.STRING)
        self.value = str(value)


class IdentifierVariable(Variable):
    """Variable that names a module; it cannot be reassigned."""

    def __init__(self, value=""):
        super().__init__(Type.IDENTIFIER)
        self.value = str(value)