"""The ``if (<a> <op> <b>): <command> else <command>`` construct."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

Executor = Callable[[str, list], None]

_OPERATOR_TOKENS = frozenset({"!", "<", ">", "=", "==", "!=", "<=", ">="})
_COMPARISONS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


class ConditionalSyntaxError(ValueError):
    """Raised when an ``if`` command is malformed."""


@dataclass
class IfElse:
    """A parsed ``if`` command."""

    left: list[str]
    operator: str
    right: list[str]
    if_command: list[str] = field(default_factory=list)
    else_command: list[str] = field(default_factory=list)

    def compare(self, left: float, right: float) -> bool:
        comparison = _COMPARISONS.get(self.operator)
        return bool(comparison(left, right)) if comparison else False


def parse_if_else(args: Sequence[str]) -> IfElse:
    """Parse the tokens that follow ``if``."""
    args = list(args)
    if not args or args[0] != "(":
        raise ConditionalSyntaxError("Syntax error: Expected '(' after 'if'")

    count = len(args)
    i = 1
    while i < count and args[i] not in _OPERATOR_TOKENS:
        i += 1
    left = args[1:i]
    if i == count:
        raise ConditionalSyntaxError(
            "Syntax error: Expected comparison operator in if condition"
        )

    op = args[i]
    followed_by_equals = i + 1 < count and args[i + 1] == "="
    if op in ("<", ">"):
        if followed_by_equals:
            op += "="
            i += 1
    elif op == "=":
        if not followed_by_equals:
            raise ConditionalSyntaxError("Syntax error: Expected '=' after '='")
        op = "=="
        i += 1
    i += 1

    try:
        close = args.index(")", i)
    except ValueError:
        raise ConditionalSyntaxError("Syntax error: Expected ')' in if condition") from None
    right = args[i:close]

    rest = args[close + 1:]
    if not rest or rest[0] != ":":
        raise ConditionalSyntaxError("Syntax error: Expected ':' after if condition")
    body = rest[1:]

    if "else" in body:
        split = body.index("else")
        return IfElse(left, op, right, body[:split], body[split + 1:])
    return IfElse(left, op, right, body, [])


def handle_if_else(args: Sequence[str], evaluator, execute: Executor) -> bool:
    """Evaluate the condition, run the matching branch, return the condition."""
    parsed = parse_if_else(args)
    left = evaluator.evaluate(parsed.left)
    right = evaluator.evaluate(parsed.right)
    result = parsed.compare(left, right)
    branch = parsed.if_command if result else parsed.else_command
    if branch:
        execute(branch[0], branch[1:])
    return result