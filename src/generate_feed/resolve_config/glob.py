"""Glob compilation with literal path separators.

``*``, ``?`` and character classes never match ``/``, so ``*.md`` selects only
top-level chapters while ``posts/*.md`` stays inside ``posts/``. A ``**``
component matches any number of directories:

- ``**/x`` matches ``x``, ``a/x``, ``a/b/x``
- ``a/**`` matches everything below ``a/``
- ``a/**/x`` matches ``a/x``, ``a/b/x``
- ``**`` on its own matches every path

``{a,b}`` alternation and ``\\`` escapes are supported.
"""

from __future__ import annotations

import re

from generate_feed.models import GlobMatcher

SEPARATOR = "/"


def compile_glob(glob: str) -> GlobMatcher:
    """Compile a glob into a matcher. Raises ValueError on a malformed glob."""
    return GlobMatcher(glob=glob, regex=re.compile(translate(glob)))


def translate(glob: str) -> str:
    """Translate a glob into a regular expression for full-path matching."""
    parts: list[str] = []
    i = 0
    n = len(glob)
    in_alternation = False

    while i < n:
        c = glob[i]

        if c == "*" and glob.startswith("**", i):
            parts.append(_recursive(glob, i))
            i += 2
            # A recursive component swallows its trailing separator.
            if i < n and glob[i] == SEPARATOR:
                i += 1
            continue

        if c == "*":
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        elif c == "[":
            cls, i = _char_class(glob, i)
            parts.append(cls)
            continue
        elif c == "{":
            if in_alternation:
                raise ValueError(f"nested alternation at position {i} in {glob!r}")
            in_alternation = True
            parts.append("(?:")
        elif c == "}" and in_alternation:
            in_alternation = False
            parts.append(")")
        elif c == "," and in_alternation:
            parts.append("|")
        elif c == "\\":
            if i + 1 >= n:
                raise ValueError(f"dangling escape at end of {glob!r}")
            i += 1
            parts.append(re.escape(glob[i]))
        else:
            parts.append(re.escape(c))
        i += 1

    if in_alternation:
        raise ValueError(f"unclosed alternation in {glob!r}")

    return "".join(parts)


def _recursive(glob: str, i: int) -> str:
    """Regex for a ``**`` starting at position i."""
    starts_component = i == 0 or glob[i - 1] == SEPARATOR
    end = i + 2
    ends_component = end == len(glob) or glob[end] == SEPARATOR
    if not (starts_component and ends_component):
        raise ValueError(f"'**' must be a whole path component in {glob!r}")

    if end == len(glob):
        # "a/**" keeps at least one character below the directory.
        return ".*" if i == 0 else ".+"
    # "**/" and "a/**/" match zero or more directories.
    return "(?:.*/)?"


def _char_class(glob: str, i: int) -> tuple[str, int]:
    """Translate the class starting at glob[i] == "[". Returns (regex, next index)."""
    j = i + 1
    n = len(glob)
    negate = False
    if j < n and glob[j] in "!^":
        negate = True
        j += 1
    # A leading "]" is a literal member.
    if j < n and glob[j] == "]":
        j += 1
    while j < n and glob[j] != "]":
        j += 1
    if j >= n:
        raise ValueError(f"unclosed character class at position {i} in {glob!r}")

    body = glob[i + 1 + (1 if negate else 0):j]
    members = (
        body.replace("\\", "\\\\")
        .replace("^", "\\^")
        .replace("[", "\\[")
        .replace("]", "\\]")
    )
    if negate:
        return f"[^/{members}]", j + 1
    return f"(?!/)[{members}]", j + 1
