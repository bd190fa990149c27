"""Arithmetic expressions over tokens, with environment variable lookup."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated."""


def _is_operator(token: str) -> bool:
    return token in _PRECEDENCE


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def infix_to_postfix(tokens: Iterable[str]) -> list[str]:
    """Reorder infix tokens into postfix order."""
    output: list[str] = []
    stack: list[str] = []
    for token in tokens:
        if _is_operator(token):
            while stack and _PRECEDENCE.get(stack[-1], 0) >= _PRECEDENCE[token]:
                output.append(stack.pop())
            stack.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("Mismatched parentheses")
            stack.pop()
        else:
            output.append(token)
    output.extend(reversed(stack))
    return output


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def evaluate_postfix(tokens: Iterable[str]) -> float:
    """Evaluate postfix tokens and return the value on top of the stack."""
    stack: list[float] = []
    for token in tokens:
        if _is_operator(token):
            if len(stack) < 2:
                raise ExpressionError(f"Missing operand for '{token}'")
            b = stack.pop()
            a = stack.pop()
            if token == "+":
                stack.append(a + b)
            elif token == "-":
                stack.append(a - b)
            elif token == "*":
                stack.append(a * b)
            else:
                stack.append(_divide(a, b))
        else:
            try:
                stack.append(float(token))
            except ValueError:
                raise ExpressionError(f"Invalid number: {token}") from None
    if not stack:
        raise ExpressionError("Empty expression")
    return stack[-1]


class ExpressionEvaluator:
    """Evaluates token lists, replacing names by environment values."""

    def __init__(self, environment) -> None:
        self.environment = environment

    def _substitute(self, token: str) -> str:
        if _is_operator(token) or token in ("(", ")") or _is_number(token):
            return token
        value = self.environment.get_env(token)
        if not value:
            raise ExpressionError(f"Variable {token} not set.")
        return value

    def evaluate(self, tokens: Sequence[str]) -> float:
        infix = [self._substitute(token) for token in tokens]
        return evaluate_postfix(infix_to_postfix(infix))