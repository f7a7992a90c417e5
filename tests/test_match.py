import numpy as np
import pytest

from rock_paper_scissors.choice import Choice, Outcome
from rock_paper_scissors.config import BestOf, MatchConfig
from rock_paper_scissors.match import MatchResult, MatchState, RoundRecord, Winner, play_match
from rock_paper_scissors.player import ScriptedPlayer

R, P, S = Choice.Rock, Choice.Paper, Choice.Scissors


def scripted(rounds: list[tuple[Choice, Choice]]) -> tuple[ScriptedPlayer, ScriptedPlayer]:
    return ScriptedPlayer(h for h, _ in rounds), ScriptedPlayer(c for _, c in rounds)


def test_new_match():
    state = MatchState.new()
    assert (state.round, state.human_points, state.computer_points) == (1, 0, 0)
    assert state.best_of == 5


def test_human_gets_point():
    state = MatchState.new()
    state.record_round(Outcome.FirstWins)
    assert state.human_points == 1
    assert state.computer_points == 0
    assert state.round == 2


def test_computer_gets_point():
    state = MatchState.new()
    state.record_round(Outcome.SecondWins)
    assert state.computer_points == 1
    assert state.round == 2


def test_draw_gives_no_point():
    state = MatchState.new()
    state.record_round(Outcome.Draw)
    assert (state.human_points, state.computer_points, state.round) == (0, 0, 2)


def test_round_winner():
    state = MatchState.new()
    assert state.round_winner(P, R) is Winner.Human
    assert state.round_winner(R, P) is Winner.Computer
    assert state.round_winner(S, S) is Winner.Draw


def test_points_never_exceed_rounds():
    rng = np.random.default_rng(3)
    outcomes = list(Outcome)
    state = MatchState.new()
    for k in range(1, 50):
        previous = (state.human_points, state.computer_points)
        state.record_round(outcomes[rng.integers(0, len(outcomes))])
        assert state.human_points + state.computer_points <= k
        assert state.round == 1 + k
        assert state.human_points >= previous[0]
        assert state.computer_points >= previous[1]


def test_equal_points_is_a_draw():
    state = MatchState.new()
    for outcome in [Outcome.SecondWins, Outcome.SecondWins, Outcome.FirstWins, Outcome.FirstWins]:
        state.record_round(outcome)
    assert state.match_winner() is Winner.Draw


def test_match_winner():
    state = MatchState.new()
    state.record_round(Outcome.FirstWins)
    assert state.match_winner() is Winner.Human
    state.record_round(Outcome.SecondWins)
    state.record_round(Outcome.SecondWins)
    assert state.match_winner() is Winner.Computer


def test_should_stop_when_other_player_cant_win_anymore():
    state = MatchState.new(MatchConfig(BestOf.default()))
    for _ in range(3):
        state.record_round(Outcome.SecondWins)
    assert state.can_end_early()


def test_cannot_end_early_below_majority():
    state = MatchState.new(MatchConfig(BestOf(5)))
    for outcome in [Outcome.SecondWins, Outcome.SecondWins, Outcome.FirstWins, Outcome.FirstWins]:
        state.record_round(outcome)
        assert not state.can_end_early()
    state.record_round(Outcome.FirstWins)
    assert state.can_end_early()


def test_draws_do_not_clinch():
    state = MatchState.new(MatchConfig(BestOf(3)))
    for _ in range(5):
        state.record_round(Outcome.Draw)
    assert not state.can_end_early()


def test_best_of_three_stops_once_clinched():
    human, computer = scripted([(R, S), (P, R), (S, P)])
    result = play_match(MatchConfig(BestOf(3), stop_early_on_clinch=True), human, computer)
    assert result.human_points == 2
    assert result.computer_points == 0
    assert result.rounds_played == 2
    assert result.winner is Winner.Human
    assert [record.round for record in result.rounds] == [1, 2]


def test_best_of_five_played_to_the_end():
    # Human, Computer, Draw, Human, Computer
    human, computer = scripted([(R, S), (R, P), (P, P), (S, P), (S, R)])
    result = play_match(MatchConfig(BestOf(5), stop_early_on_clinch=False), human, computer)
    assert (result.human_points, result.computer_points) == (2, 2)
    assert result.rounds_played == 5
    assert result.winner is Winner.Draw
    assert [record.winner for record in result.rounds] == [
        Winner.Human,
        Winner.Computer,
        Winner.Draw,
        Winner.Human,
        Winner.Computer,
    ]


def test_all_rounds_played_without_stop_early():
    human, computer = scripted([(R, S)] * 5)
    result = play_match(MatchConfig(BestOf(5)), human, computer)
    assert result.rounds_played == 5
    assert result.human_points == 5


def test_state_round_after_full_match():
    state = MatchState.new(MatchConfig(BestOf(5)))
    for outcome in [Outcome.FirstWins, Outcome.SecondWins, Outcome.Draw, Outcome.FirstWins, Outcome.SecondWins]:
        state.record_round(outcome)
    assert state.round == 6
    assert state.match_winner() is Winner.Draw


def test_on_round_receives_records_in_order():
    seen: list[RoundRecord] = []
    human, computer = scripted([(R, R), (P, S), (S, P)])
    play_match(MatchConfig(BestOf(3)), human, computer, on_round=seen.append)
    assert seen == [
        RoundRecord(1, R, R, Winner.Draw),
        RoundRecord(2, P, S, Winner.Computer),
        RoundRecord(3, S, P, Winner.Human),
    ]


def test_player_errors_abort_the_match():
    class Failing(ScriptedPlayer):
        def choose(self):
            raise ValueError("bad input")

    with pytest.raises(ValueError, match="bad input"):
        play_match(MatchConfig(BestOf(3)), Failing([]), ScriptedPlayer([R, R, R]))


def test_result_is_immutable():
    human, computer = scripted([(R, S)] * 3)
    result = play_match(MatchConfig(BestOf(3)), human, computer)
    assert isinstance(result, MatchResult)
    assert isinstance(result.rounds, tuple)
    with pytest.raises(AttributeError):
        result.human_points = 0  # type: ignore[misc]
