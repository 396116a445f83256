"""Concrete automaton constructions built on binmod.core."""
