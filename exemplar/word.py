"""Utilities for word games."""


def is_palindrome_bytes(s: str) -> bool:
    """Report whether s reads the same forward and backward, byte by byte.

    This naive version compares the UTF-8 bytes at the start of each
    character with their mirror bytes, so it neither ignores case and
    punctuation nor handles multi-byte characters correctly.
    """
    data = s.encode("utf-8")
    last = len(data) - 1
    starts = (i for i, b in enumerate(data) if b & 0xC0 != 0x80)
    return all(data[i] == data[last - i] for i in starts)


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same forward and backward.

    Letter case is ignored, as are non-letters.
    """
    letters = [ch.lower() for ch in s if ch.isalpha()]
    return letters == letters[::-1]