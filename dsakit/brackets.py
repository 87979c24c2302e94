"""Bracket balance checks for (), [], {} and <>."""

from __future__ import annotations

PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSERS = {closer: opener for opener, closer in PAIRS.items()}


class BracketMismatch(ValueError):
    """Raised when brackets in a text do not balance.

    ``opening`` is the unmatched opening bracket, or ``None`` when a closer
    arrived with nothing open; ``closing`` is the offending closer, or
    ``None`` when the text ended with a bracket still open; ``index`` is
    the position in the text where the problem was found.
    """

    def __init__(self, opening: str | None, closing: str | None, index: int) -> None:
        self.opening = opening
        self.closing = closing
        self.index = index
        if opening is None:
            message = f"unexpected {closing!r} at {index}"
        elif closing is None:
            message = f"unclosed {opening!r} at end of text"
        else:
            message = f"Not matching: {opening} {closing} at {index}"
        super().__init__(message)


def is_mirror_balanced(text: str) -> bool:
    """Check that ``text`` is an opening half mirrored by its closing half.

    Every character in the first half must be an opening bracket whose
    closer sits at the mirrored position in the second half, as in
    ``"{([])}"``. Odd-length texts are never balanced.
    """
    if len(text) % 2:
        return False
    half = len(text) // 2
    return all(
        PAIRS.get(opener) == closer
        for opener, closer in zip(text[:half], reversed(text[half:]))
    )


def check_balanced(text: str) -> list[tuple[str, str]]:
    """Match the brackets of ``text`` with a stack, ignoring other characters.

    Returns the matched ``(opening, closing)`` pairs in the order they were
    closed, and raises ``BracketMismatch`` at the first fault.
    """
    stack: list[str] = []
    matched: list[tuple[str, str]] = []
    for index, char in enumerate(text):
        if char in PAIRS:
            stack.append(char)
        elif char in CLOSERS:
            if not stack:
                raise BracketMismatch(None, char, index)
            opener = stack.pop()
            if PAIRS[opener] != char:
                raise BracketMismatch(opener, char, index)
            matched.append((opener, char))
    if stack:
        raise BracketMismatch(stack[-1], None, len(text))
    return matched


def is_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is properly matched."""
    try:
        check_balanced(text)
    except BracketMismatch:
        return False
    return True