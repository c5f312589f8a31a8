"""Rock-paper-scissors and a single-batsman cricket game against the computer."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum

STONE = "s"
PAPER = "p"
SCISSORS = "z"

# Each choice mapped to the one it defeats.
_BEATS = {STONE: SCISSORS, PAPER: STONE, SCISSORS: PAPER}


class Outcome(Enum):
    """Result of a round from the player's side."""

    LOSE = 0
    WIN = 1
    DRAW = -1


def rps_result(user: str, computer: str) -> Outcome:
    """Outcome for the player choosing ``user`` against ``computer``.

    Choices are 's' (stone), 'p' (paper) and 'z' (scissors).
    """
    for choice in (user, computer):
        if choice not in _BEATS:
            raise ValueError(f"unknown choice {choice!r}; use 's', 'p' or 'z'")
    if user == computer:
        return Outcome.DRAW
    return Outcome.WIN if _BEATS[user] == computer else Outcome.LOSE


def computer_choice(rng: random.Random) -> str:
    """Pick the computer's move from a number drawn in 0..99."""
    n = rng.randrange(100)
    if n < 33:
        return STONE
    if 33 < n < 66:
        return PAPER
    return SCISSORS


class GameState(Enum):
    """Where a cricket game stands."""

    PLAYING = "playing"
    WON = "won"
    OUT = "out"


@dataclass(frozen=True)
class Ball:
    """One delivery: the runs the player called and the number the computer drew."""

    runs: int
    system: int
    out: bool


class CricketGame:
    """Score more than the target; calling the same number as the computer is out."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.target = self._rng.randrange(25) + 1
        self.total = 0
        self.state = GameState.PLAYING

    def play_ball(self, runs: int) -> Ball:
        """Play one ball with the player's call of ``runs``."""
        if self.state is not GameState.PLAYING:
            raise RuntimeError(f"the game is over ({self.state.value})")
        system = self._rng.randrange(6) + 1
        if runs == system:
            self.state = GameState.OUT
            return Ball(runs, system, True)
        self.total += runs
        if self.total > self.target:
            self.state = GameState.WON
        return Ball(runs, system, False)


_MESSAGES = {
    Outcome.DRAW: "Game Draw!",
    Outcome.WIN: "Wow! You have won the game!",
    Outcome.LOSE: "Oh! You have lost the game!",
}


def _play_rps(rng: random.Random) -> int:
    computer = computer_choice(rng)
    print("Enter 's' for STONE, 'p' for PAPER and 'z' for SCISSOR")
    try:
        answer = input().strip()
    except EOFError:
        answer = ""
    user = answer[:1]
    try:
        outcome = rps_result(user, computer)
    except ValueError:
        print(f"Invalid choice {answer!r}.")
        return 1
    print(_MESSAGES[outcome])
    print(f"You choose : '{user}' and Computer choose : '{computer}'")
    return 0


def _play_cricket(rng: random.Random) -> int:
    game = CricketGame(rng)
    print("~~~~~~~~ CRICKET GAME ~~~~~~~~~~")
    print(f"Your winning score {game.target}")
    while True:
        print("Enter no. between 1 to 6")
        try:
            runs = int(input().strip())
        except EOFError:
            return 1
        except ValueError:
            print("Please enter a whole number.")
            return 1
        ball = game.play_ball(runs)
        print(f"System: {ball.system}")
        if game.state is GameState.OUT:
            print(f"OUT your score ={game.total}")
            return 0
        if game.state is GameState.WON:
            print(f"you won your score={game.total}")
            return 0


def main(argv: list[str] | None = None) -> int:
    """Play one game on the terminal and return the exit status."""
    parser = argparse.ArgumentParser(description="Play a game against the computer.")
    parser.add_argument("game", nargs="?", choices=("rps", "cricket"), default="rps")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's moves")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    if args.game == "cricket":
        return _play_cricket(rng)
    return _play_rps(rng)