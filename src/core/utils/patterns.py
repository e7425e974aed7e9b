"""
Ant-style request path patterns.

`/**` stands for zero or more path segments, so "/api/**" covers "/api",
"/api/" and "/api/users/42". A bare `**` spans any characters, `*` stays
inside one segment and `?` matches one non-separator character.
"""

import re
from re import Pattern

_PATH_PATTERN_CACHE: dict[str, Pattern[str]] = {}

_ANY_SEGMENTS = "/**"


def compile_path_pattern(pattern: str) -> Pattern[str]:
    """Convert an Ant-style request path pattern into a compiled regex.

    Args:
        pattern: The path pattern string, e.g. "/**" or "/api/*/items".

    Returns:
        A compiled regex pattern object.
    """
    cached = _PATH_PATTERN_CACHE.get(pattern)
    if cached:
        return cached

    regex_parts: list[str] = []
    i = 0
    length = len(pattern)
    while i < length:
        # "/**" as a whole segment may also match nothing at all.
        if pattern.startswith(_ANY_SEGMENTS, i):
            end = i + len(_ANY_SEGMENTS)
            if end == length or pattern[end] == "/":
                regex_parts.append("(?:/.*)?")
                i = end
                continue

        char = pattern[i]
        if char == "*":
            if i + 1 < length and pattern[i + 1] == "*":
                regex_parts.append(".*")
                i += 1
            else:
                regex_parts.append("[^/]*")
        elif char == "?":
            regex_parts.append("[^/]")
        else:
            regex_parts.append(re.escape(char))
        i += 1

    compiled = re.compile("^" + "".join(regex_parts) + "$")
    _PATH_PATTERN_CACHE[pattern] = compiled
    return compiled


def path_matches(path: str, pattern: str) -> bool:
    """Check if a request path is covered by a path pattern.

    Args:
        path: The request path (no query string).
        pattern: The Ant-style pattern.

    Returns:
        True if the path matches, False otherwise.
    """
    if not path or not pattern:
        return False

    return compile_path_pattern(pattern).match(path) is not None
