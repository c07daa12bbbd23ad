"""A three-round game of rock, paper and scissors against the computer."""

from __future__ import annotations

import argparse
import random
from enum import Enum

ROUNDS = 3


class Choice(Enum):
    """A hand a player can show."""

    ROCK = "r"
    PAPER = "p"
    SCISSORS = "s"


def greater(first: Choice, second: Choice) -> int:
    """Compare two hands: -1 on a tie, 1 if ``first`` wins, otherwise 0.

    Only rock beating scissors counts as a win for ``first``.
    """
    if first is second:
        return -1
    if first is Choice.ROCK and second is Choice.SCISSORS:
        return 1
    return 0


def score_round(computer: Choice, player: Choice) -> tuple[int, int]:
    """Points won in one round as ``(computer, player)``; a tie scores both."""
    result = greater(computer, player)
    if result == 1:
        return 1, 0
    if result == -1:
        return 1, 1
    return 0, 1


class Game:
    """Running scores of a game between a player and the computer."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player_score = 0
        self.computer_score = 0

    def play_round(self, player: Choice) -> Choice:
        """Play ``player`` against a random computer hand and return that hand."""
        choices = list(Choice)
        computer = choices[self.rng.randrange(len(choices))]
        computer_points, player_points = score_round(computer, player)
        self.computer_score += computer_points
        self.player_score += player_points
        return computer

    def winner(self) -> str | None:
        """Return ``"player"`` or ``"computer"`` for the leader, None on a draw."""
        if self.player_score > self.computer_score:
            return "player"
        if self.computer_score > self.player_score:
            return "computer"
        return None


def _read_choice() -> Choice:
    choices = list(Choice)
    while True:
        answer = input("Choose 1 for rock, 2 for paper and 3 for scissors\n").strip()
        if answer in {"1", "2", "3"}:
            return choices[int(answer) - 1]
        print("Please enter 1, 2 or 3.")


def main(argv: list[str] | None = None) -> int:
    """Play the game interactively on the terminal."""
    parser = argparse.ArgumentParser(description="Rock, paper, scissors.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    print("Welcome to the game of rock, paper!!")
    try:
        for _ in range(ROUNDS):
            print("It is your turn!")
            player = _read_choice()
            print(f"You choose {player.value} \n")
            print("Computer's turn now!")
            computer = game.play_round(player)
            print(f"Computer choose {computer.value}!!\n")
            print("Final score after this round are:")
            print(f"Your score:{game.player_score}")
            print(f"Computer score:{game.computer_score}\n")
    except EOFError:
        return 1

    messages = {
        "player": "You win this game!!",
        "computer": "CPU won the game",
        None: "This game is a draw!",
    }
    print(messages[game.winner()])
    return 0