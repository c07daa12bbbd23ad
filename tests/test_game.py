import random
from unittest import mock

import pytest

from algolab.game import ROUNDS, Choice, Game, greater, main, score_round


class _FixedRng:
    def __init__(self, *indices):
        self._indices = list(indices)

    def randrange(self, stop):
        value = self._indices.pop(0)
        assert 0 <= value < stop
        return value


@pytest.mark.parametrize("choice", list(Choice))
def test_greater_tie(choice):
    assert greater(choice, choice) == -1


def test_greater_rock_beats_scissors():
    assert greater(Choice.ROCK, Choice.SCISSORS) == 1


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (Choice.PAPER, Choice.ROCK),
        (Choice.SCISSORS, Choice.PAPER),
        (Choice.SCISSORS, Choice.ROCK),
        (Choice.ROCK, Choice.PAPER),
        (Choice.PAPER, Choice.SCISSORS),
    ],
)
def test_greater_other_pairs(first, second):
    assert greater(first, second) == 0


def test_score_round_cases():
    assert score_round(Choice.ROCK, Choice.SCISSORS) == (1, 0)
    assert score_round(Choice.PAPER, Choice.PAPER) == (1, 1)
    assert score_round(Choice.SCISSORS, Choice.ROCK) == (0, 1)


def test_play_round_uses_rng_index():
    game = Game(_FixedRng(0))
    assert game.play_round(Choice.SCISSORS) is Choice.ROCK
    assert (game.computer_score, game.player_score) == (1, 0)
    assert game.winner() == "computer"


def test_draw_after_ties():
    game = Game(_FixedRng(1, 1, 1))
    for _ in range(ROUNDS):
        assert game.play_round(Choice.PAPER) is Choice.PAPER
    assert game.player_score == game.computer_score == ROUNDS
    assert game.winner() is None


def test_player_leads():
    game = Game(_FixedRng(2))
    game.play_round(Choice.ROCK)
    assert game.winner() == "player"


@pytest.mark.parametrize("seed", range(10))
def test_scores_follow_score_round(seed):
    game = Game(random.Random(seed))
    for player in list(Choice) * 2:
        before = (game.computer_score, game.player_score)
        computer = game.play_round(player)
        gained = score_round(computer, player)
        assert (game.computer_score, game.player_score) == (
            before[0] + gained[0],
            before[1] + gained[1],
        )


def test_main_plays_three_rounds(capsys):
    with mock.patch("builtins.input", side_effect=["1", "4", "2", "3"]):
        status = main(["--seed", "7"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.count("Your score:") == ROUNDS
    assert "Please enter 1, 2 or 3." in out
    last = out.strip().splitlines()[-1]
    assert last in {"You win this game!!", "CPU won the game", "This game is a draw!"}


def test_main_stops_on_end_of_input():
    with mock.patch("builtins.input", side_effect=EOFError):
        assert main([]) == 1