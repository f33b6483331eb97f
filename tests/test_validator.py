"""Tests for set validation."""

from itertools import permutations, product

import pytest

from set_game.errors import SelectionSizeError
from set_game.game.validator import SetValidator, find_all_sets, find_first_set, is_set
from set_game.models.card import Card, CardAttributes, Color, Count, Shape, Style


def attrs(style: str, shape: str, color: str, count: int) -> CardAttributes:
    return CardAttributes(style=style, shape=shape, color=color, count=count)


ALL_ATTRIBUTES = [
    CardAttributes(style=s, shape=sh, color=c, count=n)
    for s, sh, c, n in product(Style, Shape, Color, Count)
]


@pytest.fixture
def validator():
    return SetValidator()


class TestIsSet:
    """Tests for the set predicate."""

    def test_all_different(self, validator):
        """Test a set where every attribute differs."""
        a = attrs("solid", "diamond", "green", 1)
        b = attrs("outline", "oval", "purple", 2)
        c = attrs("striped", "squiggle", "red", 3)
        assert validator.is_set(a, b, c)

    def test_mixed_valid(self, validator):
        """Test style/color all same, shape/count all different."""
        a = attrs("solid", "diamond", "green", 1)
        b = attrs("solid", "oval", "green", 2)
        c = attrs("solid", "squiggle", "green", 3)
        assert validator.is_set(a, b, c)

    def test_invalid_two_same_one_different(self, validator):
        """Test that two matching styles and one odd style fail."""
        a = attrs("solid", "diamond", "green", 1)
        b = attrs("solid", "oval", "green", 2)
        c = attrs("outline", "squiggle", "red", 3)
        assert not validator.is_set(a, b, c)

    def test_same_card_three_times(self, validator):
        """Test that any card with itself is trivially a set."""
        for a in ALL_ATTRIBUTES:
            assert validator.is_set(a, a, a)

    def test_count_checked(self, validator):
        """Test that count takes part in the rule."""
        a = attrs("solid", "oval", "red", 1)
        b = attrs("solid", "oval", "red", 1)
        c = attrs("solid", "oval", "red", 2)
        assert not validator.is_set(a, b, c)

    def test_order_independent(self, validator):
        """Test that argument order never changes the answer."""
        triples = [
            (ALL_ATTRIBUTES[0], ALL_ATTRIBUTES[40], ALL_ATTRIBUTES[80]),
            (ALL_ATTRIBUTES[1], ALL_ATTRIBUTES[2], ALL_ATTRIBUTES[3]),
            (ALL_ATTRIBUTES[5], ALL_ATTRIBUTES[17], ALL_ATTRIBUTES[29]),
            (ALL_ATTRIBUTES[10], ALL_ATTRIBUTES[10], ALL_ATTRIBUTES[11]),
        ]
        for triple in triples:
            results = {validator.is_set(*p) for p in permutations(triple)}
            assert len(results) == 1

    def test_any_two_cards_complete_to_one_set(self, validator):
        """Test that each pair of distinct cards has exactly one third card."""
        a = attrs("solid", "diamond", "green", 1)
        b = attrs("outline", "diamond", "red", 1)
        thirds = [c for c in ALL_ATTRIBUTES if c not in (a, b) and validator.is_set(a, b, c)]
        assert thirds == [attrs("striped", "diamond", "purple", 1)]

    def test_module_function(self):
        """Test the module-level shortcut."""
        a = attrs("solid", "diamond", "green", 1)
        b = attrs("outline", "oval", "purple", 2)
        c = attrs("striped", "squiggle", "red", 3)
        assert is_set(a, b, c)


class TestValidate:
    """Tests for SetValidator.validate()."""

    def test_valid(self, validator):
        """Test a valid selection."""
        result = validator.validate([
            attrs("solid", "diamond", "green", 1),
            attrs("solid", "oval", "green", 2),
            attrs("solid", "squiggle", "green", 3),
        ])
        assert result.is_valid
        assert result.error_message == ""
        assert result.failed_attributes == []

    def test_invalid_reports_positions(self, validator):
        """Test that failing positions are named."""
        result = validator.validate([
            attrs("solid", "diamond", "green", 1),
            attrs("solid", "oval", "green", 2),
            attrs("outline", "squiggle", "red", 3),
        ])
        assert not result.is_valid
        assert result.failed_attributes == ["style", "color"]
        assert "style" in result.error_message

    def test_accepts_cards(self, validator):
        """Test validating Card objects."""
        cards = [
            Card.from_attributes(attrs("solid", "diamond", "green", 1)),
            Card.from_attributes(attrs("outline", "oval", "purple", 2)),
            Card.from_attributes(attrs("striped", "squiggle", "red", 3)),
        ]
        assert validator.validate(cards).is_valid

    @pytest.mark.parametrize("size", [0, 1, 2, 4])
    def test_wrong_size(self, validator, size):
        """Test that selections other than three cards are rejected."""
        selection = ALL_ATTRIBUTES[:size]
        with pytest.raises(SelectionSizeError):
            validator.validate(selection)

    def test_wrong_size_is_value_error(self, validator):
        """Test that a bad selection size is an invalid-argument error."""
        with pytest.raises(ValueError):
            validator.validate(ALL_ATTRIBUTES[:2])


class TestFindSets:
    """Tests for set finding."""

    def test_find_all_sets(self):
        """Test finding every set among cards."""
        cards = [
            attrs("solid", "diamond", "green", 1),
            attrs("solid", "oval", "green", 2),
            attrs("solid", "squiggle", "green", 3),
            attrs("outline", "squiggle", "red", 3),
        ]
        sets = find_all_sets(cards)
        assert sets == [(cards[0], cards[1], cards[2])]

    def test_find_all_sets_full_deck(self):
        """Test the known count of sets in the 81-card deck."""
        assert len(find_all_sets(ALL_ATTRIBUTES)) == 1080

    def test_find_first_set(self):
        """Test finding the first set."""
        cards = [
            attrs("outline", "squiggle", "red", 3),
            attrs("solid", "diamond", "green", 1),
            attrs("outline", "oval", "purple", 2),
            attrs("striped", "squiggle", "red", 3),
        ]
        assert find_first_set(cards) == (cards[1], cards[2], cards[3])

    def test_find_first_set_none(self):
        """Test that no set returns None."""
        cards = [
            attrs("solid", "diamond", "green", 1),
            attrs("solid", "oval", "green", 2),
            attrs("outline", "squiggle", "red", 3),
        ]
        assert find_first_set(cards) is None
        assert find_all_sets(cards) == []

    def test_find_sets_returns_cards(self):
        """Test that Card inputs come back as Cards."""
        cards = [
            Card.from_attributes(attrs("solid", "diamond", "green", 1)),
            Card.from_attributes(attrs("outline", "oval", "purple", 2)),
            Card.from_attributes(attrs("striped", "squiggle", "red", 3)),
        ]
        found = find_first_set(cards)
        assert found is not None
        assert all(isinstance(c, Card) for c in found)
