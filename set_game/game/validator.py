"""Set validation and set finding."""

from dataclasses import dataclass, field
from itertools import combinations
from typing import Sequence, TypeVar

from set_game.errors import SelectionSizeError
from set_game.models.card import ATTRIBUTE_NAMES, Card, CardAttributes

SET_SIZE = 3

T = TypeVar("T", Card, CardAttributes)


@dataclass
class ValidationResult:
    """Result of set validation."""

    is_valid: bool
    error_message: str = ""
    failed_attributes: list[str] = field(default_factory=list)


def _attributes(card: Card | CardAttributes) -> CardAttributes:
    return card.attributes if isinstance(card, Card) else card


def _position_ok(values: Sequence[object]) -> bool:
    """All pairwise equal or all pairwise distinct."""
    distinct = len(set(values))
    return distinct == 1 or distinct == len(values)


class SetValidator:
    """Judges whether three cards form a set.

    For each attribute position the three values must be either
    all the same or all different.
    """

    def failed_positions(
        self,
        a: CardAttributes,
        b: CardAttributes,
        c: CardAttributes,
    ) -> list[str]:
        """Get names of attribute positions that break the rule."""
        failed = []
        for name, values in zip(ATTRIBUTE_NAMES, zip(a.as_tuple(), b.as_tuple(), c.as_tuple())):
            if not _position_ok(values):
                failed.append(name)
        return failed

    def is_set(
        self,
        a: CardAttributes,
        b: CardAttributes,
        c: CardAttributes,
    ) -> bool:
        """Check if three attribute tuples form a valid set."""
        return not self.failed_positions(a, b, c)

    def validate(self, selection: Sequence[Card | CardAttributes]) -> ValidationResult:
        """Validate a selection of cards.

        Args:
            selection: Cards or attribute tuples picked by the player

        Returns:
            ValidationResult

        Raises:
            SelectionSizeError: The selection is not exactly three cards.
        """
        if len(selection) != SET_SIZE:
            raise SelectionSizeError(
                f"A set needs exactly {SET_SIZE} cards, got {len(selection)}"
            )

        a, b, c = (_attributes(card) for card in selection)
        failed = self.failed_positions(a, b, c)
        if failed:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a set: {', '.join(failed)} must be all same or all different",
                failed_attributes=failed,
            )
        return ValidationResult(is_valid=True)

    def find_all_sets(self, cards: Sequence[T]) -> list[tuple[T, T, T]]:
        """Find every valid set among the cards.

        Checks all C(n,3) combinations; for a 12-card board that is 220.
        """
        return [
            combo
            for combo in combinations(cards, SET_SIZE)
            if self.is_set(*(_attributes(card) for card in combo))
        ]

    def find_first_set(self, cards: Sequence[T]) -> tuple[T, T, T] | None:
        """Find the first valid set, or None if there is none."""
        for combo in combinations(cards, SET_SIZE):
            if self.is_set(*(_attributes(card) for card in combo)):
                return combo
        return None


_default_validator = SetValidator()


def is_set(a: CardAttributes, b: CardAttributes, c: CardAttributes) -> bool:
    """Check if three attribute tuples form a valid set."""
    return _default_validator.is_set(a, b, c)


def find_all_sets(cards: Sequence[T]) -> list[tuple[T, T, T]]:
    """Find every valid set among the cards."""
    return _default_validator.find_all_sets(cards)


def find_first_set(cards: Sequence[T]) -> tuple[T, T, T] | None:
    """Find the first valid set, or None if there is none."""
    return _default_validator.find_first_set(cards)
