"""The main loop's cycle: step modules, fire rules and advance routines."""

from __future__ import annotations

from typing import Any, Callable

from .registry import Registry

Echo = Callable[[str], None]


def step_module(module: Any, echo: Echo) -> None:
    """Step one module and report a runtime error instead of raising it."""
    try:
        module.step()
    except RuntimeError as error:
        echo(f'error in module "{module.name}": {error}')


def run_cycle(registry: Registry, core: Any, echo: Echo) -> None:
    """Run one cycle of the main loop.

    All modules except ``core`` are stepped in name order, then ``core``.
    Every rule whose condition holds starts its routine unless it is already
    running, and every rule routine is stepped. Finally all named routines
    are stepped in name order. Runtime errors are reported through ``echo``
    and do not stop the cycle.
    """
    for _, module in sorted(registry.modules.items(), key=lambda item: item[0]):
        if module is not core:
            step_module(module, echo)
    step_module(core, echo)

    for rule in registry.rules:
        try:
            if rule.condition.evaluate_boolean() and not rule.routine.is_running():
                rule.routine.start()
            rule.routine.step()
        except RuntimeError as error:
            echo(f"error in rule: {error}")

    for name, routine in sorted(registry.routines.items(), key=lambda item: item[0]):
        try:
            routine.step()
        except RuntimeError as error:
            echo(f'error in routine "{name}": {error}')