"""
Masking codec for Name components.

A component has two forms:
    - semantic value: what the component means, delimiter and escape taken literally
    - masked form: safe to place between delimiters without ambiguity

Only two characters are special: the delimiter and the escape character.
The escape character is fixed process-wide; the delimiter is chosen per Name.

Examples (delimiter '.'):
    semantic "Oh..."     <->  masked "Oh\\.\\.\\."
    semantic "a\\b"      <->  masked "a\\\\b"
"""

from typing import List

ESCAPE_CHARACTER = "\\"
DEFAULT_DELIMITER = "."


class MaskingError(ValueError):
    """Raised when masked input is malformed (trailing lone escape character)."""
    pass


def mask(value: str, delimiter: str, escape: str = ESCAPE_CHARACTER) -> str:
    """
    Mask a semantic value for placement between delimiters.

    Every escape character and every delimiter gets an escape character
    in front of it. All other characters pass through unchanged.

    Args:
        value: Semantic component value
        delimiter: Delimiter the masked form must be safe for
        escape: Escape character

    Returns:
        Masked component
    """
    masked = []
    for char in value:
        if char == escape or char == delimiter:
            masked.append(escape)
        masked.append(char)
    return "".join(masked)


def unmask(masked: str, delimiter: str, escape: str = ESCAPE_CHARACTER) -> str:
    """
    Recover the semantic value of a masked component.

    An escape character is dropped and the character after it is copied
    verbatim, whatever it is. The delimiter is accepted for symmetry with
    mask(); unmasking only depends on it through how the input was produced.

    Args:
        masked: Masked component
        delimiter: Delimiter the component was masked for
        escape: Escape character

    Returns:
        Semantic value

    Raises:
        MaskingError: If the input ends with a lone escape character
    """
    value = []
    i = 0
    while i < len(masked):
        char = masked[i]
        if char == escape:
            if i + 1 >= len(masked):
                raise MaskingError(f"Trailing escape character in masked component: {masked!r}")
            value.append(masked[i + 1])
            i += 2
        else:
            value.append(char)
            i += 1
    return "".join(value)


def split_masked(text: str, delimiter: str, escape: str = ESCAPE_CHARACTER) -> List[str]:
    """
    Split a joined masked string on its unescaped delimiters.

    Components are returned still masked. Escaped delimiters stay inside
    their component. An empty string is a single empty component.

    Raises:
        MaskingError: If the input ends with a lone escape character
    """
    components = []
    current = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == escape:
            if i + 1 >= len(text):
                raise MaskingError(f"Trailing escape character in masked string: {text!r}")
            current.append(char)
            current.append(text[i + 1])
            i += 2
        elif char == delimiter:
            components.append("".join(current))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1
    components.append("".join(current))
    return components


def is_masked(text: str, delimiter: str, escape: str = ESCAPE_CHARACTER) -> bool:
    """Check that text is a single, well-formed masked component."""
    try:
        return len(split_masked(text, delimiter, escape=escape)) == 1
    except MaskingError:
        return False


__all__ = [
    "ESCAPE_CHARACTER",
    "DEFAULT_DELIMITER",
    "MaskingError",
    "mask",
    "unmask",
    "split_masked",
    "is_masked",
]
