"""Command line front-end for binmod.

Usage
-----
binmod --modulus 3 --binary 1101
binmod                     # prompts for both values
python -m binmod -v        # same, with DEBUG logging

Values given as options go straight to the core; prompted values are
re-requested until they look valid.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys

from binmod.core.errors import ConfigurationError, InvalidInputError
from binmod.tasks.modulo import cached_automaton, remainder

_LOGGER = logging.getLogger(__name__)

_MODULUS_RE = re.compile(r"-?(0|[1-9][0-9]*)")
_BINARY_RE = re.compile(r"[01]+")

MODULUS_PROMPT = "Enter the modulus (must be an integer greater than 1, e.g., 3): "
MODULUS_RETRY = "Invalid modulus entered. Please enter an integer greater than 1."
BINARY_PROMPT = "Enter the binary string (must contain only '0's and '1's, e.g., 1101): "
BINARY_RETRY = (
    "Invalid binary string entered. "
    "Please enter a non-empty string containing only '0's and '1's."
)


def _prompt_modulus() -> int:
    while True:
        text = input(MODULUS_PROMPT).strip()
        if _MODULUS_RE.fullmatch(text) and int(text) > 1:
            return int(text)
        print(MODULUS_RETRY)


def _prompt_binary() -> str:
    while True:
        text = input(BINARY_PROMPT).strip()
        if _BINARY_RE.fullmatch(text):
            return text
        print(BINARY_RETRY)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="binmod",
        description="Remainder of a binary string modulo N, computed with a residue automaton.",
    )
    p.add_argument("-m", "--modulus", type=int, default=None, help="Modulus N (> 1)")
    p.add_argument("-b", "--binary", default=None, help="Binary digit string, e.g. 1101")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    ns = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        modulus = ns.modulus if ns.modulus is not None else _prompt_modulus()
        binary_string = ns.binary if ns.binary is not None else _prompt_binary()
    except EOFError:
        print("Error: no input provided", file=sys.stderr)
        return 1

    try:
        result = remainder(cached_automaton(modulus), binary_string)
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ConfigurationError as exc:
        _LOGGER.error("malformed automaton for modulus %s", modulus, exc_info=True)
        print(f"Runtime Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        _LOGGER.exception("unexpected failure for modulus %s", modulus)
        print(f"An unexpected error occurred: {exc}", file=sys.stderr)
        return 1

    print(f"The remainder of binary '{binary_string}' modulo {modulus} is: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
