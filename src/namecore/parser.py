"""
Name Parser (strings -> Name).

Reads the machine-readable data string produced by Name.as_data_string()
back into a Name, and builds Names from masked strings or semantic values.

Data string format:
    components masked for '.', joined by '.'
    "a\\.b.c" -> components ["a\\.b", "c"]
"""

import logging
from typing import Iterable

from namecore.masking import (
    DEFAULT_DELIMITER,
    MaskingError,
    mask,
    split_masked,
    unmask,
)
from namecore.model import Name

logger = logging.getLogger(__name__)


class NameParseError(MaskingError):
    """Raised when a string cannot be parsed into a Name."""
    pass


def parse_name(text: str, delimiter: str = DEFAULT_DELIMITER) -> Name:
    """
    Parse a masked string joined by delimiter into a Name.

    An empty text is an empty Name. A Name holding a single empty
    component renders to the same empty string and does not round-trip.

    Args:
        text: Masked components joined by delimiter
        delimiter: Delimiter used in text; becomes the Name's delimiter

    Returns:
        Name with the masked components of text

    Raises:
        NameParseError: If text ends with a lone escape character
    """
    if text == "":
        return Name([], delimiter)
    try:
        components = split_masked(text, delimiter)
    except MaskingError as e:
        raise NameParseError(f"Failed to parse name {text!r}: {str(e)}")
    logger.debug("Parsed %r into %d components", text, len(components))
    return Name(components, delimiter)


def parse_data_string(data: str) -> Name:
    """Parse a data string (default delimiter) into a Name; "" is the empty Name."""
    return parse_name(data, DEFAULT_DELIMITER)


def name_from_values(values: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> Name:
    """Build a Name from semantic (unmasked) component values."""
    return Name([mask(v, delimiter) for v in values], delimiter)


def with_delimiter(name: Name, delimiter: str) -> Name:
    """
    Re-express a Name under another delimiter.

    The semantic components are unchanged; only their masking differs.
    """
    values = [unmask(c, name.delimiter) for c in name.components]
    return name_from_values(values, delimiter)


__all__ = [
    "NameParseError",
    "parse_name",
    "parse_data_string",
    "name_from_values",
    "with_delimiter",
]
