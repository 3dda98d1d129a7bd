"""Error-handling exercises: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width; raise ValueError like the original parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    qty = _parse_int(item_quantity, 32)
    return qty * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying the typed quantity; raise ValueError if unaffordable."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive, non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not become a PositiveNonzeroInteger.

    ``creation`` holds the CreationError when the number was parsed but
    rejected; it is None when the text was not a number at all.
    """

    def __init__(self, creation: CreationError | None = None, detail: str = "") -> None:
        super().__init__(str(creation) if creation is not None else detail)
        self.creation = creation

    @property
    def is_parse_error(self) -> bool:
        """True when the text was not a valid integer."""
        return self.creation is None


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(detail=str(exc)) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(creation=exc) from exc