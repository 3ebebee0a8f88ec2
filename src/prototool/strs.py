"""String classification and transformation helpers used by lint checks."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence


def is_capitalized(s: str) -> bool:
    """Return True if s is not empty and the first letter is between 'A' and 'Z'."""
    if not s:
        return False
    return "A" <= s[0] <= "Z"


def is_camel_case(s: str, *extra_runes: str) -> bool:
    """Return True if s is not empty and only contains ASCII letters, digits or extra_runes.

    Case is not checked, so both camelCase and CamelCase are accepted.
    """
    if not s:
        return False
    for c in s:
        if not (_is_ascii_letter(c) or _is_ascii_digit(c)) and c not in extra_runes:
            return False
    return True


def is_lower_snake_case(s: str, *extra_runes: str) -> bool:
    """Return True if s is lower_snake_case.

    Only 'a'-'z', '0'-'9', '_' and extra_runes are allowed, and s may not
    begin or end with '_'.
    """
    if not s or s[0] == "_" or s[-1] == "_":
        return False
    for c in s:
        if not ("a" <= c <= "z" or _is_ascii_digit(c) or c == "_") and c not in extra_runes:
            return False
    return True


def is_upper_snake_case(s: str, *extra_runes: str) -> bool:
    """Return True if s is UPPER_SNAKE_CASE.

    Only 'A'-'Z', '0'-'9', '_' and extra_runes are allowed, and s may not
    begin or end with '_'.
    """
    if not s or s[0] == "_" or s[-1] == "_":
        return False
    for c in s:
        if not (_is_uppercase_rune(c) or _is_ascii_digit(c) or c == "_") and c not in extra_runes:
            return False
    return True


def is_lowercase(s: str) -> bool:
    """Return True if s is not empty and is all lowercase."""
    if not s:
        return False
    return s.lower() == s


def is_uppercase(s: str) -> bool:
    """Return True if s is not empty and is all uppercase."""
    if not s:
        return False
    return s.upper() == s


def to_upper_snake_case(s: str) -> str:
    """Convert s to UPPER_SNAKE_CASE."""
    return to_snake_case(s).upper()


def to_snake_case(s: str) -> str:
    """Convert s to Snake_case without changing the case of any letter.

    Runs of capitals are kept together, so ABBRCamel becomes ABBR_Camel.
    s is assumed to contain no spaces.
    """
    output: List[str] = []
    last = len(s) - 1
    for i, c in enumerate(s):
        if (
            i > 0
            and _is_uppercase_rune(c)
            and output[-1] != "_"
            and i < last
            and not _is_uppercase_rune(s[i + 1])
        ):
            output.append("_")
        output.append(c)
    return "".join(output)


def dedupe_slice(
    s: Sequence[str],
    modifier: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """Return s with no duplicates and no empty strings, in the same order.

    If modifier is given, it is applied to each element and the modified
    value is both the dedupe key and the value returned.
    """
    seen = set()
    o: List[str] = []
    for e in s:
        if not e:
            continue
        key = modifier(e) if modifier is not None else e
        if key not in seen:
            seen.add(key)
            o.append(key)
    return o


def dedupe_sort_slice(
    s: Sequence[str],
    modifier: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """Return s with no duplicates and no empty strings, sorted."""
    return sorted(dedupe_slice(s, modifier))


def intersection_slice(one: Sequence[str], two: Sequence[str]) -> List[str]:
    """Return the sorted intersection of one and two, ignoring empty strings."""
    return sorted({e for e in one if e} & {e for e in two if e})


def _is_ascii_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_uppercase_rune(c: str) -> bool:
    return "A" <= c <= "Z"
