"""Tests for the shared fungible balance book."""

import pytest

from amm_pool.errors import InsufficientShares, InvalidArgument
from amm_pool.ledgers.shares import ShareLedger
from tests.helpers import USER1, USER2, USER3


@pytest.fixture
def book() -> ShareLedger:
    """An empty share ledger used as a plain balance book."""
    return ShareLedger("USDc / USDt", "USDc/USDt")


class TestMintAndBurn:
    """Tests for supply changes."""

    def test_mint_grows_balance_and_supply(self, book):
        """Minting credits the holder and grows total supply."""
        book.mint(USER1, 1000)
        book.mint(USER2, 500)
        assert book.balance_of(USER1) == 1000
        assert book.total_supply == 1500

    def test_burn_shrinks_balance_and_supply(self, book):
        """Burning debits the holder and shrinks total supply."""
        book.mint(USER1, 1000)
        book.burn(USER1, 400)
        assert book.balance_of(USER1) == 600
        assert book.total_supply == 600

    def test_burn_more_than_balance_raises(self, book):
        """Burning above the balance raises and changes nothing."""
        book.mint(USER1, 10)
        with pytest.raises(InsufficientShares):
            book.burn(USER1, 11)
        assert book.balance_of(USER1) == 10
        assert book.total_supply == 10

    def test_burning_everything_drops_holder(self, book):
        """A holder whose balance reaches zero is dropped."""
        book.mint(USER1, 10)
        book.burn(USER1, 10)
        assert book.holders() == {}
        assert book.total_supply == 0

    @pytest.mark.parametrize("amount", [0, -1, True, 1.5, "10"])
    def test_invalid_amount_raises(self, book, amount):
        """Non-positive and non-integer amounts are rejected."""
        with pytest.raises(InvalidArgument):
            book.mint(USER1, amount)


class TestTransfers:
    """Tests for transfers, approvals and transfer_from."""

    def test_transfer_keeps_total(self, book):
        """Transfers move balance without changing supply."""
        book.mint(USER1, 100)
        book.transfer(USER1, USER2, 30)
        assert book.balance_of(USER1) == 70
        assert book.balance_of(USER2) == 30
        assert book.total_supply == 100

    def test_transfer_to_self(self, book):
        """Transferring to oneself leaves the balance unchanged."""
        book.mint(USER1, 100)
        book.transfer(USER1, USER1, 100)
        assert book.balance_of(USER1) == 100

    def test_identities_are_case_insensitive(self, book):
        """Holders are matched after stripping and lowercasing."""
        book.mint("0xABCdef", 5)
        assert book.balance_of(" 0xabcDEF ") == 5

    def test_transfer_from_spends_allowance(self, book):
        """transfer_from() decrements the spender's allowance."""
        book.mint(USER1, 100)
        book.approve(USER1, USER3, 50)
        book.transfer_from(USER3, USER1, USER2, 20)
        assert book.allowance(USER1, USER3) == 30
        assert book.balance_of(USER2) == 20

    def test_transfer_from_beyond_allowance_raises(self, book):
        """Spending above the allowance raises and changes nothing."""
        book.mint(USER1, 100)
        book.approve(USER1, USER3, 10)
        with pytest.raises(InsufficientShares):
            book.transfer_from(USER3, USER1, USER2, 11)
        assert book.allowance(USER1, USER3) == 10
        assert book.balance_of(USER1) == 100

    def test_transfer_from_beyond_balance_keeps_allowance(self, book):
        """A short balance leaves the allowance untouched."""
        book.mint(USER1, 5)
        book.approve(USER1, USER3, 50)
        with pytest.raises(InsufficientShares):
            book.transfer_from(USER3, USER1, USER2, 6)
        assert book.allowance(USER1, USER3) == 50

    def test_approve_zero_clears_allowance(self, book):
        """Approving zero revokes the allowance."""
        book.approve(USER1, USER3, 50)
        book.approve(USER1, USER3, 0)
        assert book.allowance(USER1, USER3) == 0
