"""Card attribute, Card and Board models."""

from enum import Enum, IntEnum
from itertools import product
from typing import Iterator

from pydantic import BaseModel

from set_game.errors import DuplicateCardError

# Joins attribute values into card labels and identities
IDENTITY_SEPARATOR = "-"


class Style(str, Enum):
    """Card fill style."""

    SOLID = "solid"
    OUTLINE = "outline"
    STRIPED = "striped"


class Color(str, Enum):
    """Card symbol color."""

    GREEN = "green"
    PURPLE = "purple"
    RED = "red"


class Shape(str, Enum):
    """Card symbol shape."""

    DIAMOND = "diamond"
    OVAL = "oval"
    SQUIGGLE = "squiggle"


class Count(IntEnum):
    """Number of symbols printed on the card."""

    ONE = 1
    TWO = 2
    THREE = 3


# Attribute positions in CardAttributes order
ATTRIBUTE_NAMES = ("style", "shape", "color", "count")


class CardAttributes(BaseModel, frozen=True):
    """Ordered (Style, Shape, Color, Count) attribute tuple of a card."""

    style: Style
    shape: Shape
    color: Color
    count: Count

    def as_tuple(self) -> tuple[Style, Shape, Color, Count]:
        """Get attributes in identity order."""
        return (self.style, self.shape, self.color, self.count)

    @property
    def label(self) -> str:
        """Full joined attribute string (e.g., "solid-oval-red-2")."""
        return IDENTITY_SEPARATOR.join(
            [self.style.value, self.shape.value, self.color.value, str(self.count.value)]
        )

    def identity(self, include_count: bool = False) -> str:
        """Get the board uniqueness key for these attributes.

        The key is the label with the final separator and Count digit
        dropped, so by default two cards differing only in Count share
        an identity.

        Args:
            include_count: Keep the Count digit in the key.

        Returns:
            Identity string (e.g., "solid-oval-red").
        """
        if include_count:
            return self.label
        return self.label.rsplit(IDENTITY_SEPARATOR, 1)[0]

    def __str__(self) -> str:
        return self.label


def identity_domain(
    easy_style: Style | None = None,
    include_count: bool = False,
) -> set[str]:
    """Get every identity a generator can produce.

    Args:
        easy_style: Fixed style for easy mode, or None for all styles.
        include_count: Whether Count is part of the identity.

    Returns:
        Set of identity strings.
    """
    styles = [easy_style] if easy_style is not None else list(Style)
    return {
        CardAttributes(style=s, shape=sh, color=c, count=n).identity(include_count)
        for s, sh, c, n in product(styles, Shape, Color, Count)
    }


class Card(BaseModel, frozen=True):
    """A card on the board: attributes plus derived identity."""

    attributes: CardAttributes
    identity: str

    @classmethod
    def from_attributes(
        cls,
        attributes: CardAttributes,
        include_count: bool = False,
    ) -> "Card":
        """Create a card, deriving its identity from the attributes."""
        return cls(attributes=attributes, identity=attributes.identity(include_count))

    @property
    def label(self) -> str:
        """Full attribute label including Count."""
        return self.attributes.label

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Card({self.label})"


class Board:
    """Fixed number of card slots with unique identities.

    Slots are indexed from 0. An empty slot holds None.
    """

    def __init__(self, size: int):
        """Initialize an empty board.

        Args:
            size: Number of card slots.
        """
        if size < 0:
            raise ValueError(f"Board size must not be negative: {size}")
        self._slots: list[Card | None] = [None] * size

    @property
    def size(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < len(self._slots):
            raise IndexError(f"Slot {slot} out of range (0-{len(self._slots) - 1})")

    def get(self, slot: int) -> Card | None:
        """Get the card in a slot."""
        self._check_slot(slot)
        return self._slots[slot]

    def place(self, slot: int, card: Card) -> None:
        """Put a card into an empty slot.

        Raises:
            DuplicateCardError: The identity is already on the board.
            ValueError: The slot is occupied.
        """
        self._check_slot(slot)
        if self._slots[slot] is not None:
            raise ValueError(f"Slot {slot} is already occupied")
        if card.identity in self.identities():
            raise DuplicateCardError(f"Card identity already on board: {card.identity}")
        self._slots[slot] = card

    def add(self, card: Card) -> int:
        """Put a card into the first empty slot.

        Returns:
            Slot the card was placed in.
        """
        for slot, current in enumerate(self._slots):
            if current is None:
                self.place(slot, card)
                return slot
        raise ValueError("Board is full")

    def remove(self, slot: int) -> Card | None:
        """Empty a slot and return the card it held."""
        self._check_slot(slot)
        card = self._slots[slot]
        self._slots[slot] = None
        return card

    def replace(self, slot: int, card: Card) -> Card | None:
        """Swap the card in a slot, keeping the old one on failure."""
        old = self.remove(slot)
        try:
            self.place(slot, card)
        except DuplicateCardError:
            self._slots[slot] = old
            raise
        return old

    def clear(self) -> None:
        """Remove all cards."""
        self._slots = [None] * len(self._slots)

    def identities(self) -> set[str]:
        """Get identities of all cards on the board."""
        return {c.identity for c in self._slots if c is not None}

    def cards(self) -> list[Card]:
        """Get cards in slot order, skipping empty slots."""
        return [c for c in self._slots if c is not None]

    def occupied_slots(self) -> list[int]:
        """Get indices of non-empty slots."""
        return [i for i, c in enumerate(self._slots) if c is not None]

    def count(self) -> int:
        """Get number of cards on the board."""
        return sum(1 for c in self._slots if c is not None)

    def is_full(self) -> bool:
        """Check if every slot holds a card."""
        return all(c is not None for c in self._slots)

    def is_empty(self) -> bool:
        """Check if no slot holds a card."""
        return all(c is None for c in self._slots)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards())

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, card: Card) -> bool:
        return card.identity in self.identities()

    def __str__(self) -> str:
        if self.is_empty():
            return "[]"
        return "[" + ", ".join(
            str(c) if c is not None else "_" for c in self._slots
        ) + "]"

    def __repr__(self) -> str:
        return f"Board({self._slots!r})"
