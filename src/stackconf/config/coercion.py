"""
Coercion of command-line assignment tokens into typed values.

`--context key=value` arguments arrive as raw strings. Each value is given
its best-guess native type:

    >>> parse_context_assignments(["retries=3", "dryRun=false", "name=api"])
    {'retries': 3, 'dryRun': False, 'name': 'api'}

Coercion never fails: anything that does not parse stays a string.
"""

import json as _json
import logging as _logging
import re as _re
import typing as _typing

_logger = _logging.getLogger(__name__)

_DIGITS = _re.compile(r"[0-9]+")


def _reject_constant(name: str) -> _typing.NoReturn:
    raise ValueError(f"non-standard JSON constant: {name}")


def split_assignment(token: str) -> tuple[str, str, bool]:
    """
    Split a `name=value` token on its first `=`.

    Returns:
        (name, raw_value, is_assignment). Without an `=` the raw value is ""
        and is_assignment is False.
    """
    name, separator, raw = token.partition("=")
    return name, raw, bool(separator)


def coerce_value(raw: str) -> _typing.Any:
    """
    Convert a raw string into bool, number, dict, list or str.

    Order of attempts:
    1. JSON (true/false, numbers, objects, arrays, quoted strings).
       NaN/Infinity are not accepted and `null` is left as a string.
    2. A token made only of ASCII digits becomes an int ("007" -> 7).
    3. The raw string itself.

    Examples that stay strings: "34 35", "0x22", "bar=".
    """
    try:
        value = _json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # Malformed or too deeply nested to be JSON
        pass
    else:
        if value is not None:
            return value

    if _DIGITS.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # Longer than the interpreter allows converting to int
            return raw
    return raw


def parse_context_assignments(
    tokens: _typing.Iterable[str] | None,
) -> dict[str, _typing.Any]:
    """
    Build the `context` mapping from `key=value` tokens.

    Later tokens win over earlier ones with the same key. A token without
    `=` yields an empty-string value; a token with an empty key is skipped.

    Args:
        tokens: Raw tokens as given on the command line.

    Returns:
        Dict of key -> coerced value.
    """
    context: dict[str, _typing.Any] = {}
    for token in tokens or ():
        name, raw, _ = split_assignment(token)
        if not name:
            _logger.warning("Context argument has no key (key=value): %s", token)
            continue
        _logger.debug("CLI argument context: %s=%s", name, raw)
        context[name] = coerce_value(raw)
    return context


def parse_tags(tokens: _typing.Sequence[str] | None) -> list[dict[str, str]] | None:
    """
    Build a list of `{"Key": ..., "Value": ...}` tags from `Key=Value` tokens.

    Tag values are never coerced.

    Returns:
        None if no tags were given (or none were valid), [] if only empty
        tokens were given, otherwise the parsed tags in input order.
    """
    if not tokens:
        return None

    non_empty = [token for token in tokens if token != ""]
    if not non_empty:
        return []

    tags: list[dict[str, str]] = []
    for token in non_empty:
        key, value, is_assignment = split_assignment(token)
        if not is_assignment:
            _logger.warning("Tags argument is not an assignment (key=value): %s", token)
            continue
        _logger.debug("CLI argument tags: %s=%s", key, value)
        tags.append({"Key": key, "Value": value})

    return tags or None
