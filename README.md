# lizard

This package is the runtime core of a small control language. It has
typed variables, and expressions whose types are checked when they are
built. It has routines made of actions that run step by step, rules that
start a routine whenever their condition holds, a registry that holds
all of these by name, and a function that runs one cycle of the main
loop. It also has helpers for building and taking apart CANopen
identifiers and payloads.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `lizard.errors`: `LizardError`, a subclass of `RuntimeError`. It is
  raised for unknown names, duplicate names, type mismatches and invalid
  operations.
- `lizard.variables`: the `Type` enumeration (`BOOLEAN`, `INTEGER`,
  `NUMBER`, `NUMBERY`, `STRING`, `IDENTIFIER`) and the classes
  `Variable`, `BooleanVariable`, `IntegerVariable`, `NumberVariable`,
  `StringVariable` and `IdentifierVariable`. `Variable.assign(expression)`
  checks the expression's type. A number variable accepts any numeric
  expression, including booleans and integers. Identifier variables can
  never be assigned. `Variable.format()` returns the value as the
  interpreter prints it: `true`/`false`, an integer, a number with six
  decimals, a string in double quotes, or a bare identifier.
- `lizard.expression`: the `Expression` base class, with
  `evaluate_boolean`, `evaluate_integer`, `evaluate_number`,
  `evaluate_string`, `evaluate_identifier`, `is_numbery` and `format`.
- `lizard.expressions`: the concrete expressions and
  `format_arguments(arguments)`, which joins formatted arguments with
  `", "`.
  - Literals: `BooleanExpression`, `StringExpression`,
    `IntegerExpression`, `NumberExpression`.
  - References: `VariableExpression`, and `PropertyExpression`, which
    reads `module.get_property(name).value`.
  - Arithmetic: `PowerExpression`, `NegateExpression`,
    `MultiplyExpression`, `DivideExpression`, `ModuloExpression`,
    `FloorDivideExpression`, `AddExpression`, `SubtractExpression`.
    Integer results wrap to signed 64 bits. Integer division truncates
    toward zero.
  - Bitwise: `ShiftLeftExpression`, `ShiftRightExpression`,
    `BitAndExpression`, `BitXorExpression`, `BitOrExpression`.
  - Comparison: `GreaterExpression`, `LessExpression`,
    `GreaterEqualExpression`, `LessEqualExpression`, `EqualExpression`,
    `UnequalExpression`.
  - Logic: `NotExpression`, `AndExpression`, `OrExpression`.
- `lizard.actions`: the `Action` base class and the actions
  `AwaitCondition`, `AwaitRoutine`, `MethodCall`, `PropertyAssignment`,
  `RoutineCall` and `VariableAssignment`, together with `Routine`
  (`start`, `step`, `is_running`) and `Rule` (a condition and a
  routine). A routine's `step()` runs actions until one returns `False`
  or the routine has finished.
- `lizard.registry`: `Registry`, which holds `modules`, `routines`,
  `variables` and `rules`. It provides `get_*`, `add_*` and `has_*`
  methods for each. Adding a module also adds an identifier variable of
  the same name.
- `lizard.scheduler`: `step_module(module, echo)` and
  `run_cycle(registry, core, echo)`. One cycle steps every module except
  `core` in name order and then `core`. Next it starts the routine of
  every rule whose condition holds and whose routine is not running, and
  steps each rule's routine. Last it steps every named routine in name
  order. A `RuntimeError` raised in any of these steps is passed to
  `echo` as a message, and the cycle goes on.
- `lizard.canopen`: the enumerations `CobFunction`, `NmtStateChange`,
  `OpModeCode`, `HeartbeatStateCode`, `InitState`,
  `ServerCommandSpecifier` and `SdoWriteFailureReason`, along with
  object-index and SDO-header constants. It also has these functions:
  - `wrap_cob_id` and `unwrap_cob_id`, for COB-IDs.
  - `make_mapping_entry`, `rpdo_com_param_index`, `rpdo_mappings_index`
    and `rpdo_func`, for PDO indices and mappings.
  - `marshal_unsigned`, `demarshal_unsigned`, `marshal_i32`,
    `demarshal_i32` and `marshal_index`, for little-endian encoding.
  - `check_node_id`, which accepts node ids 1 to 127.

## Example

```python
from lizard.variables import IntegerVariable
from lizard.expressions import AddExpression, IntegerExpression, VariableExpression
from lizard.registry import Registry

registry = Registry()
registry.add_variable("x", IntegerVariable(2))

total = AddExpression(VariableExpression(registry.get_variable("x")), IntegerExpression(3))
print(total.evaluate_integer())  # 5
print(total.format())            # 5
```

## What this package does not do

- It has no parser for the language's text. You build expressions,
  actions, routines and rules in Python.
- It has no command-line program, and it does not read input lines or
  run a main loop forever. `run_cycle` performs a single pass, and the
  caller repeats it.
- It provides no modules and no device drivers. Anything placed in
  `Registry.modules` must supply the methods the package calls on it:
  `step()`, `name`, `get_property()`, `write_property()` and
  `call_with_shadows()`.
- It does not store or load a startup script.