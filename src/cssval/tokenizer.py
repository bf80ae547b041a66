"""Split CSS property values into component-value strings."""

from __future__ import annotations

from cssval.warning_policy import WarningPolicy, emit_warning

__all__ = ["split_into_component_values"]


def split_into_component_values(
    text: str, *, warning_policy: WarningPolicy | None = None
) -> list[str]:
    """Split a property value into its top-level component values.

    Whitespace separates components only outside of parentheses, so each
    function call stays a single token however deeply it nests::

        >>> split_into_component_values("auto 100%")
        ['auto', '100%']
        >>> split_into_component_values("calc(0% + 50px) calc(100% - 50px)")
        ['calc(0% + 50px)', 'calc(100% - 50px)']

    Unbalanced parentheses do not fail: the affected token runs to the end of
    the input and a ``W01`` diagnostic is emitted.

    Args:
        text: Raw property value text.
        warning_policy: Optional policy applied to diagnostics.

    Returns:
        Non-empty component-value strings in input order.
    """
    tokens: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        if text[i].isspace():
            i += 1
            continue

        start = i
        depth = 0
        while i < n:
            ch = text[i]
            if depth == 0 and ch.isspace():
                break
            i += 1
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    break

        token = text[start:i]
        if depth != 0:
            emit_warning(
                "W01",
                f"Unbalanced parentheses in component value {token!r}",
                policy=warning_policy,
            )
        tokens.append(token)

    return tokens
