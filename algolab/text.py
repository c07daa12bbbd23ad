"""Letter and number patterns, infix-to-postfix conversion and character codes."""

from __future__ import annotations

from string import ascii_lowercase

_PRECEDENCE = {
    "^": 3,
    "$": 3,
    "*": 2,
    "/": 2,
    "%": 2,
    "+": 1,
    "-": 1,
    "(": 0,
}


def alphabet_pattern(n: int) -> str:
    """Return the first ``n`` letters mirrored around ``a``, joined by dashes.

    For ``n`` from 1 to 26 the pattern runs from the ``n``-th letter down to
    ``a`` and back up again; any other ``n`` gives a single dash.
    """
    if not 1 <= n <= len(ascii_lowercase):
        return "-"
    letters = ascii_lowercase[:n]
    return "-".join(letters[::-1] + letters[1:])


def number_pyramid(rows: int) -> list[str]:
    """Return the lines of a centred number pyramid with ``rows`` rows.

    Row ``i`` counts up from ``i`` to ``2*i - 1`` and back down to ``i``;
    every number is followed by a space and each row is indented by two
    spaces per row still to come.
    """
    lines = []
    for i in range(1, rows + 1):
        values = [*range(i, 2 * i), *range(2 * i - 2, i - 1, -1)]
        indent = "  " * (rows - i)
        lines.append(indent + "".join(f"{value} " for value in values))
    return lines


def precedence(operator: str) -> int:
    """Binding strength of an operator; ``(`` binds weakest of all."""
    try:
        return _PRECEDENCE[operator]
    except KeyError:
        raise ValueError(f"unknown operator {operator!r}") from None


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Operators of equal precedence associate to the left. Whitespace is
    ignored. Raises ValueError for unknown characters and unbalanced
    parentheses.
    """
    stack = ["("]
    output: list[str] = []
    for char in expression + ")":
        if char.isspace():
            continue
        if not stack:
            raise ValueError("unbalanced parentheses")
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            strength = precedence(char)
            while precedence(stack[-1]) >= strength:
                output.append(stack.pop())
            stack.append(char)
    if stack:
        raise ValueError("unbalanced parentheses")
    return "".join(output)


def ascii_code(char: str) -> int:
    """Return the ASCII code of a single character."""
    if len(char) != 1:
        raise ValueError(f"expected exactly one character, got {char!r}")
    if not char.isascii():
        raise ValueError(f"{char!r} is not an ASCII character")
    return ord(char)