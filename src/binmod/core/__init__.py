"""Generic automaton machinery: errors, the DFA engine and RNG helpers."""
