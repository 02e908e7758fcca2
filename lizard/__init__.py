"""Typed variables, expressions, routines, rules, a registry and a cycle runner for a control language, with CANopen helpers."""

__version__ = "0.1.0"