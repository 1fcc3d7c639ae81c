"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Callable

from transitions import Machine

from config import GameConfig, config as app_config
from core.cards import Card, Deck, DeckExhausted
from core.hand import Outcome, evaluate_hands
from core.player import Player
from core.game.actions import Action, ActionSource
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import RoundState

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of one call to Game.round()."""

    round_number: int
    outcomes: dict[str, Outcome] = field(default_factory=dict)
    # Whether the dealer turn and resolution phase ran
    resolved: bool = False

    def winners(self) -> list[str]:
        return [name for name, outcome in self.outcomes.items() if outcome == Outcome.WIN]


class Game:
    """
    Single-deck blackjack table using a state machine.

    Owns the deck, the dealer and the participants. Communication with the
    outside happens through the action source passed to round(), return
    values and events only.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        # A round interrupted by DeckExhausted may be restarted from where it stopped
        {
            "trigger": "start_round",
            "source": ["idle", "round_complete", "dealing", "player_turns", "dealer_turn"],
            "dest": "dealing",
        },
        {"trigger": "cards_dealt", "source": "dealing", "dest": "player_turns"},
        {"trigger": "players_done", "source": "player_turns", "dest": "dealer_turn"},
        {"trigger": "players_all_bust", "source": "player_turns", "dest": "resolving"},
        {"trigger": "players_done_unresolved", "source": "player_turns", "dest": "round_complete"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolving"},
        {"trigger": "resolved", "source": "resolving", "dest": "round_complete"},
    ]

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new table with an empty participant list.

        Args:
            config: Round rules (uses the application config if not provided)
            rng: Random number generator for reproducible draws
        """
        self.config = config or app_config.game
        if rng is None and app_config.seed is not None:
            rng = Random(app_config.seed)

        self.deck = Deck(rng=rng)
        self.dealer = Player(self.config.dealer_name)
        self.players: list[Player] = []
        self.rounds = 0
        # Names of participants whose current hand has already been scored
        self._settled: set[str] = set()
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def add_player(self, name: str) -> Player:
        """
        Seat a new participant at the end of the turn order.

        Raises:
            ValueError: If the name is blank or already seated
        """
        if not name or not name.strip():
            raise ValueError("Player name must not be empty")
        if any(p.name == name for p in self.players):
            raise ValueError(f"Player {name!r} is already seated")

        player = Player(name)
        self.players.append(player)
        self.events.emit_new(EventType.PLAYER_JOINED, player=name, seat=len(self.players) - 1)
        return player

    def reset_deck(self) -> None:
        """Return every drawn card to the deck."""
        self.deck.reset()
        self.events.emit_new(EventType.DECK_RESET)
        logger.debug("Deck reset")

    def clear_hands(self) -> None:
        """Empty the dealer's and every participant's hand so the next round deals afresh."""
        self.dealer.hand.clear()
        for player in self.players:
            player.hand.clear()
        self._settled.clear()
        self.events.emit_new(EventType.HANDS_CLEARED)

    def round(self, action_source: ActionSource) -> RoundResult:
        """
        Play one round.

        Deals to empty hands, runs each participant's turn in seat order and,
        unless resolution is disabled, plays the dealer and scores the
        comparisons.

        Args:
            action_source: Called with the acting player; returns Stand or Hit

        Returns:
            The round number and each participant's outcome

        Raises:
            DeckExhausted: If the deck runs out; reset_deck() and play again
        """
        self.start_round()
        self.rounds += 1
        result = RoundResult(round_number=self.rounds)
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds)
        logger.debug("Round %d started with %d players", self.rounds, len(self.players))

        self._deal_initial_cards()
        self.cards_dealt()

        self._play_player_turns(action_source)

        if not self.config.resolve_rounds:
            self.players_done_unresolved()
        elif self.players and all(p.is_bust() for p in self.players):
            self.players_all_bust()
            self._resolve_round(result)
        else:
            self.players_done()
            self._play_dealer()
            self.dealer_done()
            self._resolve_round(result)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.rounds,
            outcomes={name: outcome.name for name, outcome in result.outcomes.items()},
        )
        return result

    def _deal_initial_cards(self) -> None:
        """
        Deal opening cards to every hand that is still empty.

        A hand's opening cards are all drawn before any is added, so an
        exhausted deck leaves the hand empty and it is dealt again next round.
        """
        for player in [self.dealer, *self.players]:
            if not player.hand.is_empty():
                continue
            cards = [self._draw_for(player) for _ in range(self.config.initial_hand_size)]
            for card in cards:
                self._give_card(player, card)

    def _draw_for(self, player: Player) -> Card:
        """Draw a card on behalf of a player."""
        try:
            return self.deck.draw()
        except DeckExhausted as exc:
            self.events.emit_new(EventType.DECK_EXHAUSTED, player=player.name, drawn=exc.drawn)
            logger.warning("Deck exhausted while dealing to %s", player.name)
            raise

    def _deal_card_to(self, player: Player) -> Card:
        """Draw a card into a player's hand."""
        return self._give_card(player, self._draw_for(player))

    def _give_card(self, player: Player, card: Card) -> Card:
        player.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            player=player.name,
            points=player.points(),
        )
        return card

    def _play_player_turns(self, action_source: ActionSource) -> None:
        """Run each participant's turn in seat order."""
        for player in self.players:
            self.events.emit_new(EventType.TURN_STARTED, player=player.name, points=player.points())
            self._play_turn(player, action_source)

    def _play_turn(self, player: Player, action_source: ActionSource) -> None:
        """Ask for actions until the player stands or busts."""
        while True:
            action = Action.parse(action_source(player))
            if action is None:
                # Unrecognised input: ask the same player again
                continue

            if action == Action.STAND:
                self.events.emit_new(EventType.PLAYER_STAND, player=player.name, points=player.points())
                return

            self._deal_card_to(player)
            self.events.emit_new(EventType.PLAYER_HIT, player=player.name, points=player.points())

            if player.is_bust():
                self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name, points=player.points())
                return

    def _play_dealer(self) -> None:
        """Dealer hits until reaching the stand threshold."""
        while self.dealer.points() < self.config.dealer_stand_threshold:
            self._deal_card_to(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, points=self.dealer.points())

        if self.dealer.is_bust():
            self.events.emit_new(EventType.DEALER_BUSTS, points=self.dealer.points())
        else:
            self.events.emit_new(EventType.DEALER_STANDS, points=self.dealer.points())

    def _resolve_round(self, result: RoundResult) -> None:
        """
        Compare participants with the dealer and award scores.

        Each hand is scored once; hands already settled in an earlier round
        are skipped until clear_hands().
        """
        for player in self.players:
            if player.name in self._settled:
                continue

            outcome = evaluate_hands(player.hand, self.dealer.hand)
            result.outcomes[player.name] = outcome
            self._settled.add(player.name)

            if outcome == Outcome.WIN:
                player.add_score()
                self.events.emit_new(EventType.PLAYER_WINS, player=player.name, score=player.score)
            elif outcome == Outcome.LOSS:
                self.dealer.add_score()
                self.events.emit_new(EventType.PLAYER_LOSES, player=player.name, score=player.score)
            else:
                self.events.emit_new(EventType.DRAW, player=player.name, score=player.score)

        result.resolved = True
        self.resolved()
