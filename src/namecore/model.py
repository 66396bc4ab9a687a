"""
Core Name Model

A Name is a sequence of string components separated by a delimiter character.

Examples:
    "oss.cs.fau.de"  four components, delimiter '.'
    "///"            four empty components, delimiter '/'
    "Oh\\.\\.\\."    one component, delimiter '.'

ARCHITECTURAL RULE:
    Components are stored MASKED.
    Accessors and mutators take and return masked components as-is.
    Only as_string() and as_data_string() go through the masking codec.
"""

import warnings
from dataclasses import dataclass, field
from typing import List, Optional

from namecore.masking import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    mask,
    unmask,
)


@dataclass
class Name:
    """
    Mutable Name value.

    Properties:
        components:
            Masked components, in order. May be empty.
            The list passed in is copied; the Name owns its own list.

        delimiter:
            Single character separating components in rendered strings.
            Should differ from the escape character.

    INVARIANTS:
        - Every component is validly masked for delimiter (caller contract)
        - Indexed operations accept 0 <= i < get_no_components() only
    """

    components: List[str] = field(default_factory=list)
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if self.delimiter == ESCAPE_CHARACTER:
            warnings.warn("Delimiter equals the escape character; masking is ambiguous", UserWarning)
        self.components = list(self.components)

    def as_string(self, delimiter: Optional[str] = None) -> str:
        """
        Human-readable representation.

        Components are unmasked with the Name's own delimiter and joined
        with the given delimiter (defaults to the Name's). Nothing is
        re-escaped, so the result is not guaranteed to parse back.
        """
        if delimiter is None:
            delimiter = self.delimiter
        return delimiter.join(unmask(c, self.delimiter) for c in self.components)

    def as_data_string(self) -> str:
        """
        Machine-readable representation using the default delimiter.

        Two Names with the same semantic components produce the same data
        string regardless of their own delimiters.
        """
        if self.delimiter == DEFAULT_DELIMITER:
            return DEFAULT_DELIMITER.join(self.components)
        return DEFAULT_DELIMITER.join(
            mask(unmask(c, self.delimiter), DEFAULT_DELIMITER) for c in self.components
        )

    def get_component(self, i: int) -> str:
        self._check_index(i)
        return self.components[i]

    def set_component(self, i: int, c: str) -> None:
        """Replace component i. c must already be masked."""
        self._check_index(i)
        self.components[i] = c

    def get_no_components(self) -> int:
        return len(self.components)

    def insert(self, i: int, c: str) -> None:
        """
        Insert masked component c before position i.

        i must be an existing position, so insert() never adds at the end.
        Use append() for that.
        """
        self._check_index(i)
        self.components.insert(i, c)

    def append(self, c: str) -> None:
        """Add masked component c at the end."""
        self.components.append(c)

    def remove(self, i: int) -> None:
        self._check_index(i)
        del self.components[i]

    def _check_index(self, i: int) -> None:
        # Only true ints: floats such as 1.0 are rejected too, and bool is
        # an int subclass but never a meaningful index
        if not isinstance(i, int) or isinstance(i, bool):
            raise IndexError(f"Invalid index: {i!r}")
        if i < 0 or i >= len(self.components):
            raise IndexError(f"Invalid index: {i} (component count {len(self.components)})")
