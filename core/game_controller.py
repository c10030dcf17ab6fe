"""
Round / score state machine for GeoGuesser.

The controller owns everything the screen shows except the tiles:
current round, the hidden answer, guessed letters, help count, score and
the last‑guess feedback.  Commands (`submit_letter_guess`, `use_help`,
`new_game`) mutate it synchronously; observers receive a fresh
`ControllerSnapshot` after every command that actually changed something.

    PLAYING ──(last word solved)──▶ GAME_OVER ──(new_game)──▶ PLAYING
"""
from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Collection, FrozenSet, List, Sequence

from config import WORDS, MAX_HELP, ROUND_POINTS, HELP_PENALTY

PLACEHOLDER = "_"

MAX_HELP_MSG = "Max number of help is reached."
NO_LETTERS_MSG = "No unguessed characters left."


class GameState(Enum):
    PLAYING = auto()
    GAME_OVER = auto()


class GuessOutcome(Enum):
    UNKNOWN = auto()
    CORRECT = auto()
    INCORRECT = auto()


FEEDBACK_TEXT = {
    GuessOutcome.CORRECT: "Congrats!",
    GuessOutcome.INCORRECT: "Nice try!",
}


def feedback_text(outcome: GuessOutcome) -> str | None:
    return FEEDBACK_TEXT.get(outcome)


# ───────────────────────── masking helpers ─────────────────────────
def masked_answer(answer: str, guessed: Collection[str],
                  placeholder: str = PLACEHOLDER) -> str:
    """*answer* with every character not in *guessed* replaced."""
    return "".join(ch if ch in guessed else placeholder for ch in answer)


def displayed_answer(masked: str) -> str:
    """Letter‑spaced form used on screen, e.g. ``"i _ _ i _ "``."""
    return "".join(f"{ch} " for ch in masked)


def round_points(help_count: int) -> int:
    return max(0, ROUND_POINTS - help_count * HELP_PENALTY)


# ───────────────────────────── snapshot ────────────────────────────
@dataclass(frozen=True)
class ControllerSnapshot:
    round: int
    round_number: int              # 1‑based, for display
    answer_image: str
    masked_answer: str
    displayed_answer: str
    score: int
    help_count: int
    help_remaining: int
    hits: FrozenSet[str]
    misses: FrozenSet[str]
    outcome: GuessOutcome
    error: str | None
    state: GameState


Observer = Callable[[ControllerSnapshot], None]


# ─────────────────────────── controller ────────────────────────────
class GuessGameController:
    def __init__(
        self,
        words: Sequence[str] = WORDS,
        max_help: int = MAX_HELP,
        rng: random.Random | None = None,
    ):
        words = tuple(words)
        if not words:
            raise ValueError("word list is empty")
        for w in words:
            if not w or w != w.lower():
                raise ValueError(f"words must be non-empty lowercase strings, got {w!r}")
        self.words    = words
        self.max_help = max_help
        self.rng      = rng or random.Random()
        self._observers: List[Observer] = []
        self._reset()

    def _reset(self) -> None:
        self._round   = 0
        self._score   = 0
        self._state   = GameState.PLAYING
        self._start_round()

    def _start_round(self) -> None:
        self._answer  = self.words[self._round]
        self._guessed: set[str] = set()
        self._help    = 0
        self._outcome = GuessOutcome.UNKNOWN
        self._error: str | None = None

    # ───────── read‑only state ─────────
    @property
    def round(self) -> int:         return self._round
    @property
    def round_number(self) -> int:  return self._round + 1
    @property
    def answer(self) -> str:        return self._answer
    @property
    def answer_image(self) -> str:  return self._answer
    @property
    def guessed_letters(self) -> FrozenSet[str]: return frozenset(self._guessed)
    @property
    def help_count(self) -> int:    return self._help
    @property
    def score(self) -> int:         return self._score
    @property
    def outcome(self) -> GuessOutcome: return self._outcome
    @property
    def error(self) -> str | None:  return self._error
    @property
    def state(self) -> GameState:   return self._state

    @property
    def masked(self) -> str:
        return masked_answer(self._answer, self._guessed)

    @property
    def displayed(self) -> str:
        return displayed_answer(self.masked)

    @property
    def help_remaining(self) -> int:
        return max(0, min(self.max_help, len(self._answer)) - self._help)

    def is_round_complete(self) -> bool:
        return self.masked == self._answer

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            round=self._round,
            round_number=self.round_number,
            answer_image=self.answer_image,
            masked_answer=self.masked,
            displayed_answer=self.displayed,
            score=self._score,
            help_count=self._help,
            help_remaining=self.help_remaining,
            hits=frozenset(ch for ch in self._guessed if ch in self._answer),
            misses=frozenset(ch for ch in self._guessed if ch not in self._answer),
            outcome=self._outcome,
            error=self._error,
            state=self._state,
        )

    # ───────── observers ─────────
    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register *callback*; returns a function that unregisters it."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)
        return unsubscribe

    def _commit(self, before: ControllerSnapshot) -> None:
        after = self.snapshot()
        if after == before:
            return
        for cb in list(self._observers):
            cb(after)

    # ───────── commands ─────────
    def submit_letter_guess(self, text: str) -> None:
        """Guess the last character of *text*; empty input is ignored."""
        if self._state is not GameState.PLAYING or not text:
            return
        # lower() can add a combining mark ("İ" -> "i" + U+0307); keep the base letter
        letter = text[-1].lower()[:1]
        if letter in self._guessed:
            return

        before = self.snapshot()
        self._guessed.add(letter)
        if letter not in self._answer:
            # wrong guesses cost like help, but never the last letter's worth
            if self._help < len(self._answer) - 1:
                self._help += 1
            self._outcome = GuessOutcome.INCORRECT
        else:
            self._outcome = GuessOutcome.CORRECT
        self._check_round_complete()
        self._commit(before)

    def use_help(self, max_help: int | None = None) -> None:
        """Reveal one random unguessed letter of the answer."""
        if self._state is not GameState.PLAYING:
            return
        limit = self.max_help if max_help is None else max_help

        before = self.snapshot()
        if self._help >= len(self._answer) or self._help >= limit:
            self._error = MAX_HELP_MSG
        else:
            unguessed = [ch for ch in self._answer if ch not in self._guessed]
            if not unguessed:
                self._error = NO_LETTERS_MSG
            else:
                self._guessed.add(self.rng.choice(unguessed))
                self._help += 1
                self._check_round_complete()
        self._commit(before)

    def new_game(self) -> None:
        before = self.snapshot()
        self._reset()
        self._commit(before)

    # ───────── internals ─────────
    def _check_round_complete(self) -> None:
        if not self.is_round_complete():
            return
        points = round_points(self._help)
        self._score += points
        print(f"[Game] Solved {self._answer!r} for {points} points (help {self._help})")
        self._advance_round()

    def _advance_round(self) -> None:
        if self._round < len(self.words) - 1:
            self._round += 1
            self._start_round()
        else:
            self._state = GameState.GAME_OVER
            print(f"[Game] Game over, final score {self._score}")
