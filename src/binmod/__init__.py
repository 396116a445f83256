"""
binmod: remainders of arbitrarily long binary strings via residue automata.

Public API:
- construct: build the modulo-N automaton
- remainder: run an automaton over a binary string
- modulus_of: construct (cached) + remainder in one call
"""

from binmod.core.errors import BinmodError, ConfigurationError, InvalidInputError
from binmod.tasks.modulo import ModuloAutomaton, cached_automaton, construct, modulus_of, remainder

__version__ = "0.1.0"

__all__ = [
    "BinmodError",
    "ConfigurationError",
    "InvalidInputError",
    "ModuloAutomaton",
    "cached_automaton",
    "construct",
    "modulus_of",
    "remainder",
    "__version__",
]
