"""Whole-string pattern matching with dynamic programming."""

from __future__ import annotations

from typing import List


def _table(rows: int, cols: int) -> List[List[bool]]:
    table = [[False] * (cols + 1) for _ in range(rows + 1)]
    table[0][0] = True
    return table


def regex_match(s: str, p: str) -> bool:
    """Match all of ``s`` against ``p``, where '.' is any character and '*' repeats the one before it."""
    dp = _table(len(s), len(p))

    for j, pc in enumerate(p):
        if pc == "*" and j >= 1 and dp[0][j - 1]:
            dp[0][j + 1] = True

    for i, sc in enumerate(s):
        for j, pc in enumerate(p):
            if pc == "*":
                if j < 1:
                    continue
                no_repeat = dp[i + 1][j - 1]
                do_repeat = p[j - 1] in (".", sc) and dp[i][j + 1]
                dp[i + 1][j + 1] = no_repeat or do_repeat
            elif pc in (".", sc):
                dp[i + 1][j + 1] = dp[i][j]

    return dp[len(s)][len(p)]


def wildcard_match(s: str, p: str) -> bool:
    """Match all of ``s`` against ``p``, where '?' is any character and '*' any run."""
    dp = _table(len(s), len(p))

    for j, pc in enumerate(p):
        if pc == "*":
            dp[0][j + 1] = dp[0][j]

    for i, sc in enumerate(s):
        for j, pc in enumerate(p):
            if pc == "*":
                dp[i + 1][j + 1] = dp[i + 1][j] or dp[i][j + 1]
            elif pc in ("?", sc):
                dp[i + 1][j + 1] = dp[i][j]

    return dp[len(s)][len(p)]