"""Turn engine for 2–6 players, resolving one roll at a time."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from snakes_ladders.board import Board
from snakes_ladders.config import BoardConfig, validate_player_names
from snakes_ladders.dice import Dice, DiceLike
from snakes_ladders.entities import Entity

logger = logging.getLogger(__name__)

CONSECUTIVE_SIX_LIMIT = 3
DEFAULT_SYMBOLS = ("🔵", "🔴", "🟢", "🟡", "🟣", "🟠")


# ── Structured types ────────────────────────────────────────────────

@dataclass
class Player:
    """A pawn on the board. Position 0 means not yet on the board."""

    name: str
    symbol: str
    position: int = 0
    consecutive_sixes: int = 0
    active: bool = True

    def has_won(self, total_cells: int) -> bool:
        return self.position >= total_cells


class TurnOutcome(enum.Enum):
    TURN_COMPLETED = "turn_completed"
    EXTRA_TURN = "extra_turn"
    TURN_REVOKED = "turn_revoked"
    PLAYER_WON = "player_won"
    GAME_ENDED = "game_ended"


@dataclass
class TurnResult:
    """What happened during one call to :meth:`Game.play_turn`.

    *player* is a snapshot of the mover after the turn resolved.
    """

    outcome: TurnOutcome
    player: Player | None
    roll: int
    description: str
    start_position: int = 0
    end_position: int = 0
    bounced: bool = False
    entity: Entity | None = None
    killed: str | None = None  # name of the player sent back to start


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives every resolved turn."""

    def on_turn(self, result: TurnResult) -> None: ...


@dataclass
class ListObserver:
    """Collects every turn result in a list."""

    results: list[TurnResult] = field(default_factory=list)

    def on_turn(self, result: TurnResult) -> None:
        self.results.append(result)


# ── Engine ───────────────────────────────────────────────────────────

class Game:
    """One game of snakes and ladders on a prebuilt board."""

    def __init__(
        self,
        board: Board,
        player_names: list[str],
        dice: DiceLike | None = None,
        observer: GameObserver | None = None,
    ):
        names = validate_player_names(player_names)
        self.board = board
        self.dice = dice or Dice()
        self.observer = observer
        self._history = ListObserver()
        self._players = [
            Player(name=name, symbol=DEFAULT_SYMBOLS[i % len(DEFAULT_SYMBOLS)])
            for i, name in enumerate(names)
        ]
        self._current = 0
        self._ended = False
        self._winner: Player | None = None
        self.turns_played = 0

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def players(self) -> list[Player]:
        """Copies of every player; mutating them does not affect the game."""
        return [replace(p) for p in self._players]

    def player(self, name: str) -> Player:
        """The live player called *name* (case-insensitive)."""
        for p in self._players:
            if p.name.lower() == name.strip().lower():
                return p
        raise KeyError(name)

    @property
    def active_players(self) -> list[Player]:
        return [replace(p) for p in self._players if p.active]

    @property
    def is_ended(self) -> bool:
        return self._ended

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def history(self) -> list[TurnResult]:
        """Every resolved turn, whatever observer the game was given."""
        return list(self._history.results)

    # ── Turn resolution ─────────────────────────────────────────────

    def play_turn(self) -> TurnResult:
        if self._ended:
            return TurnResult(
                outcome=TurnOutcome.GAME_ENDED,
                player=replace(self._winner) if self._winner else None,
                roll=0,
                description="Game has already ended",
            )

        player = self.current_player
        if not player.active:
            self._advance()
            return self.play_turn()

        roll = self.dice.roll()
        result = self._move(player, roll)

        if player.has_won(self.board.total_cells):
            self._ended = True
            self._winner = player
            result.outcome = TurnOutcome.PLAYER_WON
            logger.info("%s wins on turn %d", player.name, self.turns_played + 1)
        elif Dice.is_six(roll):
            player.consecutive_sixes += 1
            if player.consecutive_sixes >= CONSECUTIVE_SIX_LIMIT:
                player.consecutive_sixes = 0
                self._advance()
                result.outcome = TurnOutcome.TURN_REVOKED
                result.description += " - Turn revoked due to three consecutive sixes!"
            else:
                result.outcome = TurnOutcome.EXTRA_TURN
                result.description += " - Extra turn for rolling a six!"
        else:
            player.consecutive_sixes = 0
            self._advance()
            result.outcome = TurnOutcome.TURN_COMPLETED

        result.player = replace(player)
        self.turns_played += 1
        logger.debug("Turn %d: %s", self.turns_played, result.description)
        self._history.on_turn(result)
        if self.observer is not None:
            self.observer.on_turn(result)
        return result

    def _move(self, player: Player, roll: int) -> TurnResult:
        """Apply *roll* to *player*; the outcome is filled in by the caller."""
        start = player.position
        candidate = start + roll
        result = TurnResult(
            outcome=TurnOutcome.TURN_COMPLETED,
            player=None,
            roll=roll,
            description="",
            start_position=start,
            end_position=start,
        )

        # Overshoot → stay put
        if candidate > self.board.total_cells:
            result.bounced = True
            result.description = (
                f"{player.name} rolled {roll} but can't move beyond the board (position {start})"
            )
            return result

        kill_message = ""
        occupant = self._occupant(candidate, mover=player)
        if occupant is not None:
            occupant.position = 0
            result.killed = occupant.name
            kill_message = f" and killed {occupant.name} (sent back to start)"

        player.position = candidate
        landed = self.board.transform(candidate)
        transform_message = ""
        if landed != candidate:
            player.position = landed
            entity = self.board.entity_at(candidate)
            result.entity = entity
            transform_message = f" -> {entity.kind.value} from {candidate} to {landed}"

        result.end_position = player.position
        result.description = (
            f"{player.name} rolled {roll}, moved from {start} to {player.position}"
            f"{kill_message}{transform_message}"
        )
        return result

    def _occupant(self, position: int, mover: Player) -> Player | None:
        for p in self._players:
            if p is not mover and p.active and p.position == position:
                return p
        return None

    def _advance(self) -> None:
        """Move the turn pointer to the next active player."""
        for _ in range(len(self._players)):
            self._current = (self._current + 1) % len(self._players)
            if self._players[self._current].active:
                return
        self._ended = True
        logger.info("No active players remain; game over without a winner")


def new_game(
    config: BoardConfig,
    player_names: list[str],
    dice: DiceLike | None = None,
    observer: GameObserver | None = None,
) -> Game:
    """Build a board from *config* and seat *player_names* on it."""
    validate_player_names(player_names)
    board = Board.from_config(config)
    return Game(board, player_names, dice=dice, observer=observer)


def play_until_done(game: Game, max_turns: int = 1000) -> list[TurnResult]:
    """Autoplay *game* until someone wins or *max_turns* turns pass."""
    results: list[TurnResult] = []
    while not game.is_ended and len(results) < max_turns:
        results.append(game.play_turn())
    return results
