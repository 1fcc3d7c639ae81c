"""Tests for the Player class."""

from core.cards import Card, Rank, Suit
from core.player import Player


class TestPlayer:
    """Tests for Player."""

    def test_new_player(self):
        player = Player("Ann")
        assert player.name == "Ann"
        assert player.score == 0
        assert player.hand.is_empty()
        assert player.points() == 0

    def test_add_card_goes_to_hand(self):
        player = Player("Ann")
        card = Card(Rank.ACE, Suit.HEART)
        player.add_card(card)
        assert player.hand.cards == (card,)
        assert player.points() == 11

    def test_points_follow_hand(self):
        player = Player("Ann")
        for rank in (Rank.ACE, Rank.ACE, Rank.NINE):
            player.add_card(Card(rank, Suit.CLUB if rank == Rank.NINE else Suit.SPADE))
        assert player.points() == player.hand.points() == 21

    def test_is_bust(self):
        player = Player("Ann")
        for rank in (Rank.TEN, Rank.NINE, Rank.FIVE):
            player.add_card(Card(rank, Suit.DIAMOND))
        assert player.is_bust()

    def test_add_score_increments_by_one(self):
        player = Player("Ann")
        player.add_score()
        assert player.score == 1
        player.add_score()
        assert player.score == 2

    def test_each_player_owns_its_hand(self):
        ann, bob = Player("Ann"), Player("Bob")
        ann.add_card(Card(Rank.TWO, Suit.HEART))
        assert bob.hand.is_empty()
        assert ann.hand is not bob.hand
