import pytest

from lizard.actions import (
    Action,
    AwaitCondition,
    AwaitRoutine,
    MethodCall,
    PropertyAssignment,
    Routine,
    RoutineCall,
    Rule,
    VariableAssignment,
)
from lizard.errors import LizardError
from lizard.expressions import BooleanExpression, IntegerExpression, StringExpression, VariableExpression
from lizard.variables import BooleanVariable, IntegerVariable


class RecordingModule:
    def __init__(self):
        self.calls = []
        self.writes = []

    def call_with_shadows(self, method_name, arguments):
        self.calls.append((method_name, list(arguments)))

    def write_property(self, property_name, expression):
        self.writes.append((property_name, expression))


def test_action_is_abstract():
    with pytest.raises(TypeError):
        Action()


def test_await_condition_reflects_condition():
    assert AwaitCondition(BooleanExpression(True)).run() is True
    assert AwaitCondition(BooleanExpression(False)).run() is False


def test_await_condition_reads_variable_each_time():
    flag = BooleanVariable(False)
    action = AwaitCondition(VariableExpression(flag))
    assert action.run() is False
    flag.value = True
    assert action.run() is True


def test_variable_assignment_sets_value():
    variable = IntegerVariable(0)
    assert VariableAssignment(variable, IntegerExpression(5)).run() is True
    assert variable.value == 5


def test_variable_assignment_type_mismatch():
    variable = IntegerVariable(0)
    with pytest.raises(LizardError, match="type mismatch"):
        VariableAssignment(variable, StringExpression("x")).run()


def test_method_call_forwards_to_module():
    module = RecordingModule()
    argument = IntegerExpression(3)
    assert MethodCall(module, "on", [argument]).run() is True
    assert module.calls == [("on", [argument])]


def test_property_assignment_forwards_to_module():
    module = RecordingModule()
    expression = IntegerExpression(7)
    assert PropertyAssignment(module, "speed", expression).run() is True
    assert module.writes == [("speed", expression)]


def test_empty_routine_never_runs():
    routine = Routine([])
    routine.start()
    assert routine.is_running() is False


def test_routine_not_running_before_start():
    counter = IntegerVariable(0)
    routine = Routine([VariableAssignment(counter, IntegerExpression(1))])
    routine.step()
    assert routine.is_running() is False
    assert counter.value == 0


def test_routine_runs_to_completion_in_one_step():
    first = IntegerVariable(0)
    second = IntegerVariable(0)
    routine = Routine([
        VariableAssignment(first, IntegerExpression(1)),
        VariableAssignment(second, IntegerExpression(2)),
    ])
    routine.start()
    assert routine.is_running() is True
    routine.step()
    assert routine.is_running() is False
    assert (first.value, second.value) == (1, 2)


def test_routine_waits_on_condition():
    flag = BooleanVariable(False)
    counter = IntegerVariable(0)
    routine = Routine([
        AwaitCondition(VariableExpression(flag)),
        VariableAssignment(counter, IntegerExpression(1)),
    ])
    routine.start()
    routine.step()
    assert routine.is_running() is True
    assert counter.value == 0
    flag.value = True
    routine.step()
    assert routine.is_running() is False
    assert counter.value == 1


def test_routine_call_starts_target():
    flag = BooleanVariable(False)
    target = Routine([AwaitCondition(VariableExpression(flag))])
    assert RoutineCall(target).run() is True
    assert target.is_running() is True


def test_await_routine_waits_until_finished_then_restarts():
    flag = BooleanVariable(False)
    inner = Routine([AwaitCondition(VariableExpression(flag))])
    waiter = AwaitRoutine(inner)
    assert waiter.run() is False
    assert inner.is_running() is True
    assert waiter.run() is False
    flag.value = True
    inner.step()
    assert inner.is_running() is False
    assert waiter.run() is True
    flag.value = False
    assert waiter.run() is False
    assert inner.is_running() is True


def test_await_empty_routine_proceeds_immediately():
    assert AwaitRoutine(Routine([])).run() is True


def test_rule_holds_condition_and_routine():
    condition = BooleanExpression(True)
    routine = Routine([])
    rule = Rule(condition, routine)
    assert rule.condition is condition
    assert rule.routine is routine