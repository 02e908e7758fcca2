"""Concrete Lizard expressions: literals, references and operators."""

from __future__ import annotations

import math
import operator
from typing import Callable, Iterable

from .errors import LizardError
from .expression import Expression
from .variables import Type

_INT64_MIN = -(1 << 63)
_UINT64_RANGE = 1 << 64


def _wrap(value: int) -> int:
    """Reduce an integer to the signed 64-bit range (two's complement)."""
    return ((value - _INT64_MIN) % _UINT64_RANGE) + _INT64_MIN


def format_arguments(arguments: Iterable[Expression]) -> str:
    """Format a list of argument expressions, separated by commas."""
    return ", ".join(argument.format() for argument in arguments)


def _common_number_type(left: Expression, right: Expression) -> Type:
    if left.type == Type.INTEGER and right.type == Type.INTEGER:
        return Type.INTEGER
    if left.is_numbery() and right.is_numbery():
        return Type.NUMBER
    raise LizardError("invalid type for arithmetic operation")


def _check_number_types(left: Expression, right: Expression) -> None:
    if not left.is_numbery() or not right.is_numbery():
        raise LizardError("invalid type for comparison")


def _check_boolean_types(left: Expression, right: Expression) -> None:
    if left.type != Type.BOOLEAN or right.type != Type.BOOLEAN:
        raise LizardError("invalid type for logical operation")


def _truncated_quotient(a: int, b: int) -> int:
    if b == 0:
        raise LizardError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _float_divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _float_modulo(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError) as error:
        raise LizardError(f"invalid power operation: {error}") from None


def _check_shift(amount: int) -> int:
    if not 0 <= amount < 64:
        raise LizardError("invalid shift amount")
    return amount


class BooleanExpression(Expression):
    """Boolean literal."""

    def __init__(self, value):
        super().__init__(Type.BOOLEAN)
        self.value = bool(value)

    def evaluate_boolean(self) -> bool:
        return self.value


class StringExpression(Expression):
    """String literal."""

    def __init__(self, value):
        super().__init__(Type.STRING)
        self.value = str(value)

    def evaluate_string(self) -> str:
        return self.value


class IntegerExpression(Expression):
    """Integer literal."""

    def __init__(self, value):
        super().__init__(Type.INTEGER)
        self.value = int(value)

    def evaluate_integer(self) -> int:
        return self.value

    def evaluate_number(self) -> float:
        return float(self.value)


class NumberExpression(Expression):
    """Floating-point literal."""

    def __init__(self, value):
        super().__init__(Type.NUMBER)
        self.value = float(value)

    def evaluate_number(self) -> float:
        return self.value


class _StoredValueExpression(Expression):
    """Expression reading a typed value kept elsewhere."""

    _kind = "value"

    def _current(self):
        raise NotImplementedError

    def evaluate_boolean(self) -> bool:
        if self.type == Type.BOOLEAN:
            return bool(self._current())
        raise LizardError(f"{self._kind} is not a boolean")

    def evaluate_integer(self) -> int:
        if self.type == Type.INTEGER:
            return int(self._current())
        if self.type == Type.BOOLEAN:
            return 1 if self._current() else 0
        raise LizardError(f"{self._kind} cannot evaluate to an integer")

    def evaluate_number(self) -> float:
        if self.type in (Type.NUMBER, Type.INTEGER):
            return float(self._current())
        if self.type == Type.BOOLEAN:
            return 1.0 if self._current() else 0.0
        raise LizardError(f"{self._kind} cannot evaluate to a number")

    def evaluate_string(self) -> str:
        if self.type == Type.STRING:
            return str(self._current())
        raise LizardError(f"{self._kind} is not a string")

    def evaluate_identifier(self) -> str:
        if self.type == Type.IDENTIFIER:
            return str(self._current())
        raise LizardError(f"{self._kind} is not an identifier")


class VariableExpression(_StoredValueExpression):
    """Reference to a variable; reads its current value on each evaluation."""

    _kind = "variable"

    def __init__(self, variable):
        super().__init__(variable.type)
        self.variable = variable

    def _current(self):
        return self.variable.value


class PropertyExpression(_StoredValueExpression):
    """Reference to a module property; reads its current value on each evaluation."""

    _kind = "property"

    def __init__(self, module, property_name):
        super().__init__(module.get_property(property_name).type)
        self.module = module
        self.property_name = property_name

    def _current(self):
        return self.module.get_property(self.property_name).value


class _BinaryExpression(Expression):
    def __init__(self, type_, left, right):
        super().__init__(type_)
        self.left = left
        self.right = right


class _ArithmeticExpression(_BinaryExpression):
    def __init__(self, left, right):
        super().__init__(_common_number_type(left, right), left, right)


class PowerExpression(_ArithmeticExpression):
    """left ** right; integer results are truncated from the floating-point power."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        result = _power(float(self.left.evaluate_integer()), float(self.right.evaluate_integer()))
        if not math.isfinite(result):
            raise LizardError("invalid power operation: result out of range")
        return _wrap(int(result))

    def evaluate_number(self) -> float:
        return _power(self.left.evaluate_number(), self.right.evaluate_number())


class NegateExpression(Expression):
    """Arithmetic negation."""

    def __init__(self, operand):
        super().__init__(_common_number_type(operand, operand))
        self.operand = operand

    def evaluate_integer(self) -> int:
        return _wrap(-self.operand.evaluate_integer())

    def evaluate_number(self) -> float:
        return -self.operand.evaluate_number()


class MultiplyExpression(_ArithmeticExpression):
    """Multiplication."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        return _wrap(self.left.evaluate_integer() * self.right.evaluate_integer())

    def evaluate_number(self) -> float:
        return self.left.evaluate_number() * self.right.evaluate_number()


class DivideExpression(_ArithmeticExpression):
    """Division; integer division truncates toward zero."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        return _wrap(_truncated_quotient(self.left.evaluate_integer(), self.right.evaluate_integer()))

    def evaluate_number(self) -> float:
        return _float_divide(self.left.evaluate_number(), self.right.evaluate_number())


class ModuloExpression(_ArithmeticExpression):
    """Remainder; its sign follows the dividend."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        a = self.left.evaluate_integer()
        b = self.right.evaluate_integer()
        return _wrap(a - b * _truncated_quotient(a, b))

    def evaluate_number(self) -> float:
        return _float_modulo(self.left.evaluate_number(), self.right.evaluate_number())


class FloorDivideExpression(_ArithmeticExpression):
    """Floor division for numbers; integers divide as in DivideExpression."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        return _wrap(_truncated_quotient(self.left.evaluate_integer(), self.right.evaluate_integer()))

    def evaluate_number(self) -> float:
        quotient = _float_divide(self.left.evaluate_number(), self.right.evaluate_number())
        return float(math.floor(quotient)) if math.isfinite(quotient) else quotient


class AddExpression(_ArithmeticExpression):
    """Addition."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        return _wrap(self.left.evaluate_integer() + self.right.evaluate_integer())

    def evaluate_number(self) -> float:
        return self.left.evaluate_number() + self.right.evaluate_number()


class SubtractExpression(_ArithmeticExpression):
    """Subtraction."""

    def __init__(self, left, right):
        super().__init__(left, right)

    def evaluate_integer(self) -> int:
        return _wrap(self.left.evaluate_integer() - self.right.evaluate_integer())

    def evaluate_number(self) -> float:
        return self.left.evaluate_number() - self.right.evaluate_number()


class ShiftLeftExpression(_BinaryExpression):
    """Left shift."""

    def __init__(self, left, right):
        super().__init__(Type.INTEGER, left, right)

    def evaluate_integer(self) -> int:
        amount = _check_shift(self.right.evaluate_integer())
        return _wrap(self.left.evaluate_integer() << amount)


class ShiftRightExpression(_BinaryExpression):
    """Arithmetic right shift."""

    def __init__(self, left, right):
        super().__init__(Type.INTEGER, left, right)

    def evaluate_integer(self) -> int:
        amount = _check_shift(self.right.evaluate_integer())
        return self.left.evaluate_integer() >> amount


class _BitwiseExpression(_BinaryExpression):
    _operation: Callable[[int, int], int]

    def __init__(self, left, right):
        super().__init__(Type.INTEGER, left, right)

    def evaluate_integer(self) -> int:
        return _wrap(type(self)._operation(self.left.evaluate_integer(), self.right.evaluate_integer()))


class BitAndExpression(_BitwiseExpression):
    """Bitwise and."""

    _operation = staticmethod(operator.and_)

    def __init__(self, left, right):
        super().__init__(left, right)


class BitXorExpression(_BitwiseExpression):
    """Bitwise exclusive or."""

    _operation = staticmethod(operator.xor)

    def __init__(self, left, right):
        super().__init__(left, right)


class BitOrExpression(_BitwiseExpression):
    """Bitwise or."""

    _operation = staticmethod(operator.or_)

    def __init__(self, left, right):
        super().__init__(left, right)


class _ComparisonExpression(_BinaryExpression):
    _comparison: Callable[[float, float], bool]

    def __init__(self, left, right):
        super().__init__(Type.BOOLEAN, left, right)
        _check_number_types(left, right)

    def evaluate_boolean(self) -> bool:
        return type(self)._comparison(self.left.evaluate_number(), self.right.evaluate_number())


class GreaterExpression(_ComparisonExpression):
    """left > right."""

    _comparison = staticmethod(operator.gt)

    def __init__(self, left, right):
        super().__init__(left, right)


class LessExpression(_ComparisonExpression):
    """left < right."""

    _comparison = staticmethod(operator.lt)

    def __init__(self, left, right):
        super().__init__(left, right)


class GreaterEqualExpression(_ComparisonExpression):
    """left >= right."""

    _comparison = staticmethod(operator.ge)

    def __init__(self, left, right):
        super().__init__(left, right)


class LessEqualExpression(_ComparisonExpression):
    """left <= right."""

    _comparison = staticmethod(operator.le)

    def __init__(self, left, right):
        super().__init__(left, right)


class EqualExpression(_ComparisonExpression):
    """left == right."""

    _comparison = staticmethod(operator.eq)

    def __init__(self, left, right):
        super().__init__(left, right)


class UnequalExpression(_ComparisonExpression):
    """left != right."""

    _comparison = staticmethod(operator.ne)

    def __init__(self, left, right):
        super().__init__(left, right)


class NotExpression(Expression):
    """Logical negation of a boolean."""

    def __init__(self, operand):
        super().__init__(Type.BOOLEAN)
        _check_boolean_types(operand, operand)
        self.operand = operand

    def evaluate_boolean(self) -> bool:
        return not self.operand.evaluate_boolean()


class AndExpression(_BinaryExpression):
    """Short-circuit logical and."""

    def __init__(self, left, right):
        super().__init__(Type.BOOLEAN, left, right)
        _check_boolean_types(left, right)

    def evaluate_boolean(self) -> bool:
        return self.left.evaluate_boolean() and self.right.evaluate_boolean()


class OrExpression(_BinaryExpression):
    """Short-circuit logical or."""

    def __init__(self, left, right):
        super().__init__(Type.BOOLEAN, left, right)
        _check_boolean_types(left, right)

    def evaluate_boolean(self) -> bool:
        return self.left.evaluate_boolean() or self.right.evaluate_boolean()