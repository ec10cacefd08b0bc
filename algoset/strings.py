"""String algorithms: parentheses, palindromes, run-length compression and more."""

from __future__ import annotations

from itertools import groupby, product
from string import ascii_letters, digits as ascii_digits
from typing import Iterator, List

_OPENERS = {")": "(", "}": "{", "]": "["}
_ALNUM = frozenset(ascii_letters + ascii_digits)
_KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from every primitive group of a parentheses string.

    Any character other than '(' closes a group. Raises ValueError on a closer
    with nothing open.
    """
    pieces: List[str] = []
    depth = 0
    start = 0
    for index, ch in enumerate(s):
        if ch == "(":
            if depth == 0:
                start = index
            depth += 1
            continue
        if depth == 0:
            raise ValueError(f"unbalanced closing character at position {index}")
        depth -= 1
        if depth == 0:
            pieces.append(s[start + 1 : index])
    return "".join(pieces)


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly delete pairs of equal neighbouring characters."""
    kept: List[str] = []
    for ch in s:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def is_alnum_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch in _ALNUM]
    return cleaned == cleaned[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its own kind in the right order."""
    open_stack: List[str] = []
    for ch in s:
        if ch in "({[":
            open_stack.append(ch)
        elif open_stack and _OPENERS.get(ch) == open_stack[-1]:
            open_stack.pop()
        else:
            return False
    return not open_stack


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    boundaries = [-1]
    best = 0
    for index, ch in enumerate(s):
        if ch == "(":
            boundaries.append(index)
            continue
        boundaries.pop()
        if boundaries:
            best = max(best, index - boundaries[-1])
        else:
            boundaries.append(index)
    return best


def compress(chars: List[str]) -> int:
    """Run-length encode ``chars`` in place and return its new length.

    Each run becomes its character followed by the decimal run length,
    which is left out for runs of one.
    """
    encoded: List[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        encoded.append(ch)
        if count > 1:
            encoded.extend(str(count))
    chars[:] = encoded
    return len(encoded)


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; among equals, the one that starts first."""
    best_start, best_len = 0, 0
    for centre in range(len(s)):
        for lo, hi in ((centre, centre), (centre, centre + 1)):
            while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
                lo -= 1
                hi += 1
            length = hi - lo - 1
            if length > best_len:
                best_start, best_len = lo + 1, length
    return s[best_start : best_start + best_len]


def _zigzag_rows(num_rows: int) -> Iterator[int]:
    if num_rows == 1:
        while True:
            yield 0
    while True:
        yield from range(num_rows - 1)
        yield from range(num_rows - 1, 0, -1)


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    rows: List[List[str]] = [[] for _ in range(num_rows)]
    for ch, row in zip(s, _zigzag_rows(num_rows)):
        rows[row].append(ch)
    return "".join("".join(row) for row in rows)


def letter_combinations(digits: str) -> List[str]:
    """All words a phone keypad can spell from ``digits``, in keypad order."""
    if not digits:
        return []
    try:
        letters = [_KEYPAD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ["".join(combo) for combo in product(*letters)]


def _balanced(opens: int, closes: int, prefix: str) -> Iterator[str]:
    if opens == 0 and closes == 0:
        yield prefix
        return
    if opens > 0:
        yield from _balanced(opens - 1, closes, prefix + "(")
    if closes > opens:
        yield from _balanced(opens, closes - 1, prefix + ")")


def generate_parentheses(n: int) -> List[str]:
    """Every well-formed string of ``n`` parenthesis pairs, opening brackets tried first."""
    return list(_balanced(n, n, ""))


def reverse_chars(chars: List[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()