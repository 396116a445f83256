from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from binmod.core.dfa import DFA, is_total, missing_transitions
from binmod.core.errors import ConfigurationError, InvalidInputError

_LOGGER = logging.getLogger(__name__)

BINARY_ALPHABET: tuple[str, ...] = ("0", "1")
INITIAL_STATE = 0
# One table row per residue; larger moduli cannot be held in memory.
MAX_MODULUS = 1 << 24


@dataclass(frozen=True, eq=False)
class ModuloAutomaton:
    """Residue automaton for one modulus; state labels are the remainders."""

    modulus: int
    dfa: DFA


def _validate_modulus(modulus: int) -> None:
    if isinstance(modulus, bool) or not isinstance(modulus, (int, np.integer)):
        raise InvalidInputError(f"modulus must be an integer, got {type(modulus).__name__}")
    if modulus <= 1:
        raise InvalidInputError("modulus must be greater than 1")
    if modulus > MAX_MODULUS:
        raise InvalidInputError(f"modulus {modulus} is too large; the maximum is {MAX_MODULUS}")


def _residue_table(modulus: int) -> np.ndarray:
    # next(r, b) = (2r + b) mod N, one row per residue, one column per bit
    residues = np.arange(modulus, dtype=np.int64)[:, np.newaxis]
    bits = np.arange(len(BINARY_ALPHABET), dtype=np.int64)[np.newaxis, :]
    return (residues * 2 + bits) % modulus


def construct(modulus: int) -> ModuloAutomaton:
    """
    Build the binary residue automaton for ``modulus``.

    States are 0..modulus-1, the alphabet is ("0", "1") and the start state
    is 0. Reading bit b in state r moves to (2r + b) mod modulus, which is
    the remainder of the prefix read so far.

    Raises:
        InvalidInputError: modulus is not an integer, is <= 1, or is too
            large to allocate a table for.
    """
    _validate_modulus(modulus)
    modulus = int(modulus)

    try:
        dfa = DFA(
            states=tuple(range(modulus)),
            alphabet=BINARY_ALPHABET,
            transitions=_residue_table(modulus),
            initial_state=INITIAL_STATE,
        )
    except MemoryError as exc:
        raise InvalidInputError(f"modulus {modulus} is too large to allocate an automaton") from exc
    if not is_total(dfa):
        raise ConfigurationError(
            f"residue table for modulus {modulus} is missing transitions: "
            f"{missing_transitions(dfa)}"
        )

    _LOGGER.debug("built residue automaton: modulus=%d states=%d", modulus, len(dfa.states))
    return ModuloAutomaton(modulus=modulus, dfa=dfa)


@lru_cache(maxsize=128)
def _cached_construct(modulus: int) -> ModuloAutomaton:
    _LOGGER.debug("automaton cache miss: modulus=%d", modulus)
    return construct(modulus)


def cached_automaton(modulus: int) -> ModuloAutomaton:
    """Return a shared automaton for ``modulus``, building it on first use."""
    _validate_modulus(modulus)
    return _cached_construct(int(modulus))


def remainder(automaton: ModuloAutomaton, binary_string: str) -> int:
    """
    Remainder of ``binary_string`` (unsigned, most significant bit first)
    modulo ``automaton.modulus``.

    Engine failures (empty string, non-binary character) propagate unchanged.
    """
    state = automaton.dfa.run(binary_string)
    if not 0 <= state < automaton.modulus:
        raise ConfigurationError(
            f"unexpected remainder {state} for modulus {automaton.modulus}"
        )
    return state


def modulus_of(modulus: int, binary_string: str) -> int:
    return remainder(cached_automaton(modulus), binary_string)
