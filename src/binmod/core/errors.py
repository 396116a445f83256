"""
Error types for binmod.

Two failure categories:
- InvalidInputError: caller-supplied data violates a precondition
- ConfigurationError: the automaton itself is malformed (a defect)
"""


class BinmodError(Exception):
    """Base class for all binmod failures."""


class InvalidInputError(BinmodError, ValueError):
    """Empty input, a symbol outside the alphabet, or an unusable modulus."""


class ConfigurationError(BinmodError, RuntimeError):
    """Missing transition, bad initial state, or an out-of-range result."""
