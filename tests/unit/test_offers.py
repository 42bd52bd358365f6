"""Unit tests for offer rules."""

from decimal import Decimal

import pytest

from pub_drinks.domain.clock import FixedTimeSource
from pub_drinks.domain.drinks import DrinkVariant, ModifierKind
from pub_drinks.domain.offers import Offer, applicable_offers, cheapest
from pub_drinks.transaction import Transaction


def _tab(time_source: FixedTimeSource, *drinks: DrinkVariant) -> Transaction:
    transaction = Transaction(time_source=time_source)
    for drink in drinks:
        transaction.add_drink(drink)
    return transaction


@pytest.mark.unit
class TestTGIFApplicability:
    """Test suite for when the TGIF offer applies."""

    def test_applies_to_three_drinks_on_friday_evening(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(friday_evening, *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.is_applicable(transaction) is True

    def test_not_applicable_with_fewer_than_three_drinks(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(friday_evening, DrinkVariant.BEER, DrinkVariant.BEER)

        assert Offer.TGIF.is_applicable(transaction) is False

    def test_not_applicable_on_wrong_day(self, sunday: FixedTimeSource) -> None:
        transaction = _tab(sunday, *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.is_applicable(transaction) is False

    def test_not_applicable_on_friday_afternoon(self, friday_afternoon: FixedTimeSource) -> None:
        transaction = _tab(friday_afternoon, *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.is_applicable(transaction) is False

    @pytest.mark.parametrize(("hour", "expected"), [(17, False), (18, False), (19, True), (23, True)])
    def test_window_starts_after_six(self, hour: int, expected: bool) -> None:
        transaction = _tab(FixedTimeSource(2019, 2, 22, hour), *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.is_applicable(transaction) is expected

    def test_saturday_evening_does_not_qualify(self) -> None:
        transaction = _tab(FixedTimeSource(2019, 2, 23, 20), *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.is_applicable(transaction) is False

    def test_applicable_offers_lists_tgif(self, friday_evening: FixedTimeSource, sunday: FixedTimeSource) -> None:
        assert applicable_offers(_tab(friday_evening, *[DrinkVariant.BEER] * 3)) == [Offer.TGIF]
        assert applicable_offers(_tab(sunday, *[DrinkVariant.BEER] * 3)) == []


@pytest.mark.unit
class TestTGIFDiscount:
    """Test suite for the TGIF discount amount."""

    def test_three_beers_get_two_free(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(friday_evening, *[DrinkVariant.BEER] * 3)

        assert Offer.TGIF.discount_amount(transaction) == Decimal("7.98")

    def test_fourth_drink_is_not_discounted(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(friday_evening, *[DrinkVariant.BEER] * 4)

        assert Offer.TGIF.discount_amount(transaction) == Decimal("7.98")

    def test_six_drinks_get_four_free(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(friday_evening, *[DrinkVariant.CIDER] * 6)

        assert Offer.TGIF.discount_amount(transaction) == Decimal("2.99") * 4

    def test_cheapest_drinks_are_free(self, friday_evening: FixedTimeSource) -> None:
        transaction = _tab(
            friday_evening,
            DrinkVariant.WINE,
            DrinkVariant.SOFT,
            DrinkVariant.SPIRIT_OR_LIQUEUR,
            DrinkVariant.CIDER,
        )

        assert Offer.TGIF.discount_amount(transaction) == Decimal("0.99") + Decimal("2.99")

    def test_modified_cost_is_used_for_selection(self, friday_evening: FixedTimeSource) -> None:
        transaction = Transaction(time_source=friday_evening)
        transaction.add_drink(DrinkVariant.SOFT, [ModifierKind.BOTTLE])
        transaction.add_drink(DrinkVariant.BEER)
        transaction.add_drink(DrinkVariant.BEER)

        # Bottle of soft drink is 4.95, so the two beers are the cheapest.
        assert Offer.TGIF.discount_amount(transaction) == Decimal("7.98")


@pytest.mark.unit
class TestCheapest:
    """Test suite for the cheapest-item selection."""

    def test_ties_keep_insertion_order(self) -> None:
        first = ModifierKind.BOTTLE.wrap(DrinkVariant.SOFT)
        second = ModifierKind.BOTTLE.wrap(DrinkVariant.SOFT)

        assert cheapest([DrinkVariant.WINE, first, second], 2) == [first, second]
        assert cheapest([DrinkVariant.WINE, first, second], 2)[0] is first

    def test_count_zero_selects_nothing(self) -> None:
        assert cheapest([DrinkVariant.BEER], 0) == []
