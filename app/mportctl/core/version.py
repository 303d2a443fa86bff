"""Version ordering for package and OS release strings.

Versions follow the ports convention ``main[_revision][,epoch]``:

- the epoch (integer after the last ``,``) is compared first,
- then the main version, component by component,
- then the port revision (integer after the last ``_``).

A main component is a number followed by an optional letter run and an
optional patch number. ``alpha``, ``beta``, ``pre`` and ``rc`` directly
after a number open a new pre-release component that sorts below the
release (``1.0rc1 < 1.0``); any other letter run sorts above it
(``1.0a > 1.0``, ``1.0pl1 > 1.0``). Missing components count as zero, so
``1.0 == 1.0.0``. Only ASCII letters and digits form components; any
other character separates them.
"""

import string
from typing import Literal

Comparison = Literal[-1, 0, 1]

# (number, letter, patch)
Component = tuple[int, int, int]

_ZERO: Component = (0, 0, 0)

_ALNUM = string.ascii_letters + string.digits

# Pre-release stage names and the letter value they sort with
_STAGES: tuple[tuple[str, int], ...] = (
    ("alpha", 1),
    ("beta", 2),
    ("pre", 16),
    ("rc", 18),
)


def _leading_int(text: str) -> int:
    """Parse the leading decimal digits of text, 0 if there are none."""
    digits = ""
    for char in text:
        if char not in string.digits:
            break
        digits += char
    return int(digits) if digits else 0


def split_version(version: str) -> tuple[int, str, int]:
    """Split a version string into (epoch, main, revision).

    Args:
        version: Full version string, e.g. '1.2.3_4,1'.

    Returns:
        Tuple of epoch, main version text, and port revision.
    """
    main = version
    epoch = 0
    if "," in main:
        main, _, tail = main.rpartition(",")
        epoch = _leading_int(tail)
    revision = 0
    if "_" in main:
        main, _, tail = main.rpartition("_")
        revision = _leading_int(tail)
    return epoch, main, revision


def _match_stage(text: str, pos: int) -> tuple[str, int] | None:
    """Return the pre-release stage spelled at pos, if any."""
    for name, value in _STAGES:
        end = pos + len(name)
        at_boundary = end >= len(text) or text[end] not in string.ascii_letters
        if text.startswith(name, pos) and at_boundary:
            return name, value
    return None


def _skip_separators(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] not in _ALNUM:
        pos += 1
    return pos


def _read_number(text: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(text) and text[end] in string.digits:
        end += 1
    return int(text[pos:end]), end


def parse_components(main: str) -> list[Component]:
    """Break the main part of a version into comparable components.

    Args:
        main: Version text without epoch and revision.

    Returns:
        List of (number, letter, patch) tuples.
    """
    text = main.lower()
    components: list[Component] = []
    pos = _skip_separators(text, 0)

    while pos < len(text):
        number = -1
        opens_with_letters = True
        if text[pos] in string.digits:
            number, pos = _read_number(text, pos)
            opens_with_letters = False

        letter = 0
        patch = 0
        if pos < len(text) and text[pos] in string.ascii_letters:
            stage = _match_stage(text, pos)
            if stage is not None and not opens_with_letters:
                # "1.0rc1" reads as "1.0.rc1"
                components.append((number, 0, 0))
                continue
            if stage is not None:
                name, letter = stage
                pos += len(name)
            else:
                letter = ord(text[pos]) - ord("a") + 1
                while pos < len(text) and text[pos] in string.ascii_letters:
                    pos += 1
            if pos < len(text) and text[pos] in string.digits:
                patch, pos = _read_number(text, pos)

        components.append((number, letter, patch))
        pos = _skip_separators(text, pos)

    return components


def _sign(value: int) -> Comparison:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def _compare_tuples(left: Component, right: Component) -> Comparison:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare_versions(left: str, right: str) -> Comparison:
    """Compare two version strings.

    Args:
        left: First version.
        right: Second version.

    Returns:
        -1 if left < right, 0 if they are equivalent, 1 if left > right.
    """
    left_epoch, left_main, left_rev = split_version(left)
    right_epoch, right_main, right_rev = split_version(right)

    if left_epoch != right_epoch:
        return _sign(left_epoch - right_epoch)

    left_parts = parse_components(left_main)
    right_parts = parse_components(right_main)
    for index in range(max(len(left_parts), len(right_parts))):
        a = left_parts[index] if index < len(left_parts) else _ZERO
        b = right_parts[index] if index < len(right_parts) else _ZERO
        result = _compare_tuples(a, b)
        if result != 0:
            return result

    return _sign(left_rev - right_rev)


def comparison_symbol(result: int) -> str:
    """Render a comparison result as '<', '=' or '>'."""
    if result == 0:
        return "="
    return "<" if result < 0 else ">"
