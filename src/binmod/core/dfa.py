from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from binmod.core.errors import ConfigurationError, InvalidInputError

# Table entry for an undefined (state, symbol) pair.
MISSING = -1


def _index(items: Sequence[Hashable]) -> dict[Hashable, int]:
    return {item: idx for idx, item in enumerate(items)}


def _as_rows(transitions: Any) -> list[list[int]]:
    try:
        table = np.asarray(transitions, dtype=np.int64)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("transitions must be a rectangular integer table") from exc
    if table.ndim != 2:
        raise ConfigurationError(f"transitions must be two-dimensional, got ndim={table.ndim}")
    return table.tolist()


def _walk(
    state_index: dict[Hashable, int],
    symbol_index: dict[Hashable, int],
    alphabet: Sequence[str],
    initial_state: int,
    rows: list[list[int]],
    symbols: Sequence[str],
) -> int:
    if len(symbols) == 0:
        raise InvalidInputError("input must not be empty")
    if MISSING in state_index:
        raise ConfigurationError(f"state label {MISSING} is reserved for missing transitions")
    if initial_state not in state_index:
        raise ConfigurationError(f"invalid initial state: {initial_state!r}")

    current = initial_state
    for symbol in symbols:
        col = symbol_index.get(symbol)
        if col is None:
            allowed = ", ".join(str(s) for s in alphabet)
            raise InvalidInputError(
                f"invalid symbol {symbol!r} found in input; allowed symbols are: {allowed}"
            )

        try:
            next_state = rows[state_index[current]][col]
        except IndexError:
            next_state = MISSING

        if next_state == MISSING or next_state not in state_index:
            raise ConfigurationError(
                f"no transition defined for state {current} on symbol {symbol!r}"
            )
        current = next_state

    return current


def run(
    states: Sequence[int],
    alphabet: Sequence[str],
    initial_state: int,
    transitions: np.ndarray | Sequence[Sequence[int]],
    symbols: Sequence[str],
) -> int:
    """
    Simulate a DFA over ``symbols`` and return the terminal state.

    ``transitions`` is a dense table: row i belongs to ``states[i]``, column j
    to ``alphabet[j]``, and each entry is the next state (``MISSING`` if
    undefined). The walk is pure: nothing is retained between calls.

    Raises:
        InvalidInputError: empty input, or a symbol outside ``alphabet``.
        ConfigurationError: ``initial_state`` not in ``states``, or a
            (state, symbol) pair without a transition into ``states``.
    """
    return _walk(
        state_index=_index(states),
        symbol_index=_index(alphabet),
        alphabet=alphabet,
        initial_state=initial_state,
        rows=_as_rows(transitions),
        symbols=symbols,
    )


@dataclass(frozen=True, eq=False)
class DFA:
    """
    Immutable automaton description: states, alphabet, dense table, start state.

    There is no accept-state set; the terminal state itself is the answer.
    The table is copied to an int64 array and made read-only.
    """

    states: tuple[int, ...]
    alphabet: tuple[str, ...]
    transitions: np.ndarray
    initial_state: int
    _rows: list[list[int]] = field(init=False, repr=False)
    _state_index: dict[Hashable, int] = field(init=False, repr=False)
    _symbol_index: dict[Hashable, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        states = tuple(self.states)
        alphabet = tuple(self.alphabet)

        if not states:
            raise ConfigurationError("states must not be empty")
        if not alphabet:
            raise ConfigurationError("alphabet must not be empty")
        if len(set(states)) != len(states):
            raise ConfigurationError("states must be unique")
        if len(set(alphabet)) != len(alphabet):
            raise ConfigurationError("alphabet symbols must be unique")
        for state in states:
            if isinstance(state, bool) or not isinstance(state, (int, np.integer)):
                raise ConfigurationError(f"states must be integers, got {state!r}")
        states = tuple(int(state) for state in states)
        if MISSING in states:
            raise ConfigurationError(f"state label {MISSING} is reserved for missing transitions")

        if self.initial_state not in states:
            raise ConfigurationError(f"invalid initial state: {self.initial_state!r}")

        try:
            table = np.array(self.transitions, dtype=np.int64)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError("transitions must be a rectangular integer table") from exc

        expected_shape = (len(states), len(alphabet))
        if table.shape != expected_shape:
            raise ConfigurationError(
                f"transitions must have shape {expected_shape}, got {table.shape}"
            )

        unknown = set(np.unique(table).tolist()) - set(states) - {MISSING}
        if unknown:
            raise ConfigurationError(f"transitions reference unknown states: {sorted(unknown)}")

        table.flags.writeable = False
        object.__setattr__(self, "states", states)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "transitions", table)
        object.__setattr__(self, "_rows", table.tolist())
        object.__setattr__(self, "_state_index", _index(states))
        object.__setattr__(self, "_symbol_index", _index(alphabet))

    def run(self, symbols: Sequence[str]) -> int:
        return _walk(
            state_index=self._state_index,
            symbol_index=self._symbol_index,
            alphabet=self.alphabet,
            initial_state=self.initial_state,
            rows=self._rows,
            symbols=symbols,
        )

    def next_state(self, state: int, symbol: str) -> int:
        """Single table lookup; returns ``MISSING`` for an undefined pair."""
        if state not in self._state_index:
            raise ConfigurationError(f"unknown state: {state!r}")
        if symbol not in self._symbol_index:
            raise InvalidInputError(f"unknown symbol: {symbol!r}")
        return self._rows[self._state_index[state]][self._symbol_index[symbol]]


def is_total(dfa: DFA) -> bool:
    return bool(np.all(dfa.transitions != MISSING))


def missing_transitions(dfa: DFA) -> list[tuple[int, str]]:
    rows, cols = np.nonzero(dfa.transitions == MISSING)
    return [(dfa.states[int(r)], dfa.alphabet[int(c)]) for r, c in zip(rows, cols)]

