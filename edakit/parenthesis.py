"""Balanced parentheses check using a stack."""

from __future__ import annotations

import argparse
from typing import NamedTuple

from edakit.linked import Stack


class ParenthesisCheck(NamedTuple):
    """Outcome of a check and the index where scanning stopped."""

    valid: bool
    position: int


def validate_parentheses(text: str) -> ParenthesisCheck:
    """Check that every '(' in text is closed by a later ')'."""
    stack = Stack()
    position = -1
    for position, symbol in enumerate(text):
        if symbol == "(":
            stack.push(symbol)
        elif symbol == ")":
            if stack.is_empty():
                return ParenthesisCheck(False, position)
            stack.pop()
    return ParenthesisCheck(stack.is_empty(), position)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check parentheses in an expression read from stdin.")
    parser.parse_args(argv)
    try:
        line = input("Ingresa expresión: ")
    except EOFError:
        line = ""
    result = validate_parentheses(line)
    if result.valid:
        print(" Expresión Correcta ")
    else:
        print(" Expresión Inválida")
        print(f"Pos error:  {result.position}")
    return 0