from typing import Optional

from constants import SWC_FIELD_COUNT


class SWCError(Exception):
    """Base for all SWC codec errors."""


class SWCFormatError(SWCError, ValueError):
    """A line of SWC text does not follow the data-line grammar.

    Either the line does not split into exactly seven tokens (``count`` is set,
    ``field`` and ``token`` are None) or one token is not a valid number for
    its column (``field`` names the column, ``token`` holds the substring).
    """

    def __init__(
        self,
        line: str,
        field: Optional[str] = None,
        token: Optional[str] = None,
        count: Optional[int] = None,
        line_number: Optional[int] = None,
        element: Optional[int] = None,
    ):
        self.line = line
        self.field = field
        self.token = token
        self.count = count
        self.expected = SWC_FIELD_COUNT
        self.line_number = line_number
        self.element = element
        super(SWCFormatError, self).__init__(self._describe())

    def _describe(self) -> str:
        if self.field is None:
            msg = (f"Expected {self.expected} elements separated by whitespace, "
                   f"got {self.count} in line '{self.line}'.")
        else:
            # Before the index itself is known there is no element to name.
            where = "the current segment" if self.element is None else f"element {self.element}"
            msg = (f"Error while parsing entry '{self.field}' of {where}. "
                   f"Entry string: '{self.token}'")
        if self.line_number is not None:
            msg += f" (line {self.line_number})"
        return msg

