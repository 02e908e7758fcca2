"""Named modules, routines, variables and the list of rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .actions import Routine, Rule
from .errors import LizardError
from .variables import IdentifierVariable, Variable


@dataclass
class Registry:
    """Everything a Lizard program has defined, looked up by name."""

    modules: dict[str, Any] = field(default_factory=dict)
    routines: dict[str, Routine] = field(default_factory=dict)
    variables: dict[str, Variable] = field(default_factory=dict)
    rules: list[Rule] = field(default_factory=list)

    def get_module(self, name):
        try:
            return self.modules[name]
        except KeyError:
            raise LizardError(f'unknown module "{name}"') from None

    def get_routine(self, name) -> Routine:
        try:
            return self.routines[name]
        except KeyError:
            raise LizardError(f'unknown routine "{name}"') from None

    def get_variable(self, name) -> Variable:
        try:
            return self.variables[name]
        except KeyError:
            raise LizardError(f'unknown variable "{name}"') from None

    def add_module(self, name, module) -> None:
        """Register a module and an identifier variable of the same name."""
        if name in self.modules:
            raise LizardError(f'module "{name}" already exists')
        if name in self.variables:
            raise LizardError(f'variable "{name}" already exists')
        self.modules[name] = module
        self.variables[name] = IdentifierVariable(name)

    def add_routine(self, name, routine) -> None:
        if name in self.routines:
            raise LizardError(f'routine "{name}" already exists')
        self.routines[name] = routine

    def add_variable(self, name, variable) -> None:
        if name in self.variables:
            raise LizardError(f'variable "{name}" already exists')
        self.variables[name] = variable

    def add_rule(self, rule) -> None:
        self.rules.append(rule)

    def has_module(self, name) -> bool:
        return name in self.modules

    def has_routine(self, name) -> bool:
        return name in self.routines

    def has_variable(self, name) -> bool:
        return name in self.variables