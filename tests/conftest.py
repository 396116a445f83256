"""
Pytest configuration and fixtures for binmod tests.

Provides seeded binary-string sampling and prebuilt automata for unit and
integration tests. Every Generator is created explicitly from a seed, so the
same seed always yields the same strings.
"""

import numpy as np
import pytest


def _make_rng(seed: int) -> np.random.Generator:
    return np.random.Generator(np.random.PCG64(np.random.SeedSequence(seed)))


def _sample_binary_strings(
    seed: int,
    count: int,
    min_length: int = 1,
    max_length: int = 64,
) -> list[str]:
    """
    Draw ``count`` binary strings with lengths uniform in [min_length, max_length].

    Leading zeros are allowed, so "0", "00" and "0101" can all appear.
    """
    if count <= 0 or min_length <= 0 or max_length < min_length:
        raise ValueError("need count > 0 and 0 < min_length <= max_length")

    rng = _make_rng(seed)
    lengths = rng.integers(min_length, max_length + 1, size=count)
    strings = []
    for length in lengths:
        bits = rng.integers(0, 2, size=int(length), dtype=np.int8)
        strings.append("".join("1" if bit else "0" for bit in bits.tolist()))
    return strings


@pytest.fixture
def binary_strings():
    """
    Seeded sampler: ``binary_strings(seed, count, min_length=1, max_length=64)``.
    """
    return _sample_binary_strings


@pytest.fixture
def mod3_automaton():
    """The classic divisibility-by-three automaton."""
    from binmod.tasks.modulo import construct
    return construct(3)


@pytest.fixture
def tiny_dfa():
    """
    Two-state parity DFA built by hand, independent of the modulo builder.

    State 0 = even number of '1's seen, state 1 = odd.
    """
    from binmod.core.dfa import DFA
    return DFA(
        states=(0, 1),
        alphabet=("0", "1"),
        transitions=[[0, 1], [1, 0]],
        initial_state=0,
    )
