"""Formatters for game log output."""

from set_game.models.card import Board, Card, CardAttributes


def format_card(card: Card | CardAttributes) -> str:
    """Format a single card to string.

    Args:
        card: Card or attribute tuple to format.

    Returns:
        Full attribute label (e.g., "solid-oval-red-2").
    """
    return card.label


def format_cards(cards: list[Card] | tuple[Card, ...]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated labels. Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_board(board: Board) -> list[str | None]:
    """Format a board slot by slot.

    Args:
        board: Board to format.

    Returns:
        List of labels indexed by slot, None for empty slots.
    """
    slots: list[str | None] = []
    for slot in range(board.size):
        card = board.get(slot)
        slots.append(format_card(card) if card is not None else None)
    return slots
