"""Palindrome checks built on stacks."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def is_palindrome(text: str) -> bool:
    """Check ``text`` by stacking its first half and matching the second."""
    mid = len(text) // 2
    stack = list(text[:mid])
    for char in text[len(text) - mid:]:
        if not stack or stack.pop() != char:
            return False
    return True


def is_palindrome_two_stacks(text: str) -> bool:
    """Check ``text`` by stacking each half and popping them pairwise.

    The first half is pushed front to back and the second half back to
    front, so the two stacks pop matching positions from the centre out.
    A middle character of an odd-length text is skipped.
    """
    half = len(text) // 2
    left = list(text[:half])
    right = list(reversed(text[len(text) - half:]))
    while left:
        if left.pop() != right.pop():
            return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Report whether the first argument is a palindrome."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string as an argument.")
        return 1
    print("Palindrome" if is_palindrome(args[0]) else "Not Palindrome")
    return 0