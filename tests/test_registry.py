import pytest

from lizard.actions import Routine, Rule
from lizard.errors import LizardError
from lizard.expressions import BooleanExpression
from lizard.registry import Registry
from lizard.variables import IntegerVariable, Type


class DummyModule:
    pass


def test_add_and_get_module():
    registry = Registry()
    module = DummyModule()
    registry.add_module("led", module)
    assert registry.get_module("led") is module
    assert registry.has_module("led") is True


def test_add_module_creates_identifier_variable():
    registry = Registry()
    registry.add_module("led", DummyModule())
    variable = registry.get_variable("led")
    assert variable.type == Type.IDENTIFIER
    assert variable.value == "led"


def test_duplicate_module_rejected():
    registry = Registry()
    registry.add_module("led", DummyModule())
    with pytest.raises(LizardError, match='module "led" already exists'):
        registry.add_module("led", DummyModule())


def test_module_name_clashing_with_variable_rejected():
    registry = Registry()
    registry.add_variable("x", IntegerVariable())
    with pytest.raises(LizardError, match='variable "x" already exists'):
        registry.add_module("x", DummyModule())
    assert registry.has_module("x") is False


def test_unknown_lookups_raise():
    registry = Registry()
    with pytest.raises(LizardError, match='unknown module "m"'):
        registry.get_module("m")
    with pytest.raises(LizardError, match='unknown routine "r"'):
        registry.get_routine("r")
    with pytest.raises(LizardError, match='unknown variable "v"'):
        registry.get_variable("v")


def test_routines():
    registry = Registry()
    routine = Routine([])
    registry.add_routine("blink", routine)
    assert registry.get_routine("blink") is routine
    assert registry.has_routine("blink") is True
    assert registry.has_routine("other") is False
    with pytest.raises(LizardError, match='routine "blink" already exists'):
        registry.add_routine("blink", Routine([]))


def test_variables():
    registry = Registry()
    variable = IntegerVariable(4)
    registry.add_variable("count", variable)
    assert registry.get_variable("count") is variable
    assert registry.has_variable("count") is True
    with pytest.raises(LizardError, match='variable "count" already exists'):
        registry.add_variable("count", IntegerVariable())


def test_rules_keep_insertion_order():
    registry = Registry()
    first = Rule(BooleanExpression(True), Routine([]))
    second = Rule(BooleanExpression(False), Routine([]))
    registry.add_rule(first)
    registry.add_rule(second)
    assert registry.rules == [first, second]


def test_registries_are_independent():
    one = Registry()
    two = Registry()
    one.add_variable("a", IntegerVariable())
    assert two.has_variable("a") is False