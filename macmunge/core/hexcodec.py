"""Conversion between MAC addresses and delimited hex text.

Parsing strips every listed separator from the whole string before decoding, so
inputs mixing several separators (``75-df-40:2c:60-a2``) are accepted as long as
each separator is listed. The strip is blind: separators in odd places are
removed as well, which makes ``7-5df402c60a2`` decode too.
"""

import re
from collections.abc import Sequence
from functools import lru_cache

from ..errors import MalformedHex
from ..models.address import MAC_LENGTH, MacAddress
from ..models.options import DEFAULT_SEPARATORS, FormatOptions, ParseOptions
from ..result import Err, Ok, Result


_HEX_RE = re.compile(r"[0-9a-fA-F]*")


@lru_cache(maxsize=64)
def _separator_pattern(separators: tuple[str, ...]) -> re.Pattern[str] | None:
    # longest first, so overlapping separators strip as a unit
    ordered = sorted((s for s in separators if s), key=len, reverse=True)
    if not ordered:
        return None
    return re.compile("|".join(re.escape(s) for s in ordered))


def _normalize_separators(separators: Sequence[str] | str | ParseOptions | None) -> tuple[str, ...]:
    if separators is None:
        return DEFAULT_SEPARATORS
    if isinstance(separators, ParseOptions):
        return tuple(separators.separators)
    if isinstance(separators, str):
        return (separators,)
    return tuple(separators)


def strip_separators(text: str, separators: Sequence[str] | str | ParseOptions | None = None) -> str:
    """Remove every occurrence of every separator from ``text``."""

    pattern = _separator_pattern(_normalize_separators(separators))
    if pattern is None:
        return text
    return pattern.sub("", text)


def parse_hex(
    text: str,
    separators: Sequence[str] | str | ParseOptions | None = None,
) -> Result[MacAddress, MalformedHex]:
    """Parse delimited hex text into a MacAddress.

    ``separators`` defaults to ``[":", "-"]``. Returns ``Err(MalformedHex)``
    when the stripped text is not exactly 12 hex digits.
    """

    if not isinstance(text, str):
        return Err(MalformedHex(repr(text), "expected text"))

    digits = strip_separators(text, separators)

    if not _HEX_RE.fullmatch(digits):
        return Err(MalformedHex(text, "contains non-hex characters"))
    if len(digits) % 2:
        return Err(MalformedHex(text, "odd number of hex digits"))
    if len(digits) != MAC_LENGTH * 2:
        return Err(MalformedHex(text, f"decodes to {len(digits) // 2} bytes, expected {MAC_LENGTH}"))

    return Ok(MacAddress(bytes.fromhex(digits)))


def parse_hex_strict(text: str, separators: Sequence[str] | str | ParseOptions | None = None) -> MacAddress:
    """Like :func:`parse_hex` but raises ``MalformedHex`` on failure."""

    return parse_hex(text, separators).unwrap()


def format_hex(
    address: MacAddress | bytes,
    options: FormatOptions | None = None,
    *,
    case: str | None = None,
    separator: str | None = None,
) -> str:
    """Render an address as hex digit pairs joined by a separator.

    ``case`` and ``separator`` override ``options``; an unknown case raises
    ``pydantic.ValidationError``.
    """

    options = options or FormatOptions()
    if case is not None or separator is not None:
        options = FormatOptions(
            case=options.case if case is None else case,
            separator=options.separator if separator is None else separator,
        )

    digits = MacAddress(address).hex()
    if options.case == "upper":
        digits = digits.upper()

    return options.separator.join(digits[i : i + 2] for i in range(0, len(digits), 2))
