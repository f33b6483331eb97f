"""Random card generation with board-wide unique identities."""

import logging
import random

from set_game.errors import DomainExhaustedError
from set_game.models.card import (
    Card,
    CardAttributes,
    Color,
    Count,
    Shape,
    Style,
    identity_domain,
)

logger = logging.getLogger(__name__)


class CardGenerator:
    """Generates cards whose identity is not already on the board."""

    def __init__(
        self,
        rng: random.Random | None = None,
        easy_style: Style = Style.SOLID,
        include_count: bool = False,
    ):
        """Initialize generator.

        Args:
            rng: Random source (creates one if not provided)
            easy_style: Style used for every card in easy mode
            include_count: Whether Count is part of the identity
        """
        self.rng = rng or random.Random()
        self.easy_style = easy_style
        self.include_count = include_count

    def random_attributes(self, easy_mode: bool = False) -> CardAttributes:
        """Sample each attribute independently and uniformly."""
        style = self.easy_style if easy_mode else self.rng.choice(list(Style))
        return CardAttributes(
            style=style,
            shape=self.rng.choice(list(Shape)),
            color=self.rng.choice(list(Color)),
            count=self.rng.choice(list(Count)),
        )

    def available_identities(
        self,
        existing_identities: set[str],
        easy_mode: bool = False,
    ) -> set[str]:
        """Get identities that can still be generated."""
        domain = identity_domain(
            self.easy_style if easy_mode else None,
            self.include_count,
        )
        return domain - existing_identities

    def generate(
        self,
        existing_identities: set[str],
        easy_mode: bool = False,
    ) -> CardAttributes:
        """Generate attributes with an identity not in existing_identities.

        The whole tuple is resampled until its identity is free.

        Args:
            existing_identities: Identities of cards already on the board
            easy_mode: Fix Style to the easy style

        Returns:
            Fresh CardAttributes

        Raises:
            DomainExhaustedError: Every reachable identity is already taken.
        """
        if not self.available_identities(existing_identities, easy_mode):
            raise DomainExhaustedError(
                f"No free card identity left ({len(existing_identities)} in use, "
                f"easy_mode={easy_mode})"
            )

        attempts = 0
        while True:
            attempts += 1
            attributes = self.random_attributes(easy_mode)
            if attributes.identity(self.include_count) not in existing_identities:
                logger.debug(f"Generated {attributes} after {attempts} attempt(s)")
                return attributes

    def generate_card(
        self,
        existing_identities: set[str],
        easy_mode: bool = False,
    ) -> Card:
        """Generate a Card with a fresh identity."""
        attributes = self.generate(existing_identities, easy_mode)
        return Card.from_attributes(attributes, self.include_count)

    def generate_board(
        self,
        size: int,
        easy_mode: bool = False,
        existing_identities: set[str] | None = None,
    ) -> list[Card]:
        """Generate cards with pairwise unique identities.

        Args:
            size: Number of cards
            easy_mode: Fix Style to the easy style
            existing_identities: Identities that must also be avoided

        Returns:
            List of cards

        Raises:
            DomainExhaustedError: Not enough free identities for size cards.
        """
        taken = set(existing_identities or ())
        available = self.available_identities(taken, easy_mode)
        if size > len(available):
            raise DomainExhaustedError(
                f"Cannot deal {size} cards: only {len(available)} free identities"
            )

        cards: list[Card] = []
        for _ in range(size):
            card = self.generate_card(taken, easy_mode)
            taken.add(card.identity)
            cards.append(card)
        return cards
