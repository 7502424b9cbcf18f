"""Tests for turn orchestration."""

import copy

from gridrivals.engine import (
    is_stranded,
    new_game,
    play_scripted_turn,
    run_scripted_turns,
    submit_move,
    winner,
)
from gridrivals.errors import RejectionType
from gridrivals.models import Direction


class TestSubmitMove:
    """Test move submission by name or Direction."""

    def test_submit_by_name(self, make_world):
        state = make_world(["..."], [(1, 0), (2, 0)])
        outcome = submit_move(state, 0, "Left")
        assert outcome.accepted
        assert state.agent_by_id(0).position == (0, 0)

    def test_submit_by_direction(self, make_world):
        state = make_world(["...", "..."], [(0, 0), (2, 0)])
        outcome = submit_move(state, 0, Direction.DOWN)
        assert outcome.destination == (0, 1)

    def test_unknown_name(self, make_world):
        state = make_world(["..."], [(1, 0), (2, 0)])
        before = copy.deepcopy(state)

        outcome = submit_move(state, 0, "sideways")

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.INVALID_DIRECTION
        assert outcome.direction is None
        assert state == before

    def test_wrong_agent(self, make_world):
        state = make_world(["..."], [(1, 0), (2, 0)])
        outcome = submit_move(state, 1, "left")
        assert outcome.rejection == RejectionType.NOT_YOUR_TURN

    def test_stranded_human_passes(self, make_world):
        """A human standing on water with water on every side cannot move, so it passes."""
        state = make_world(["~~.", "~~."], [(0, 0), (2, 1)])

        outcome = submit_move(state, 0, "right")

        assert is_stranded(state, 0)
        assert not outcome.accepted
        assert outcome.forced_pass
        assert outcome.rejection == RejectionType.BLOCKED_BY_WATER
        assert state.agent_by_id(0).position == (0, 0)
        assert state.current_agent().id == 1
        assert state.turn_count == 1

    def test_blocked_human_keeps_turn(self, make_world):
        """A human with any dry step left must choose again."""
        state = make_world([".~", ".."], [(0, 0), (1, 1)])

        outcome = submit_move(state, 0, "right")

        assert not is_stranded(state, 0)
        assert not outcome.forced_pass
        assert outcome.rejection == RejectionType.BLOCKED_BY_WATER
        assert state.current_agent().id == 0
        assert state.turn_count == 0


class TestScriptedTurns:
    """Test scripted turn execution."""

    def test_play_scripted_turn(self, make_world):
        state = make_world(["..%", "..."], [(0, 1), (1, 0)], human_seats=())
        state.turn_cursor = 1

        outcome = play_scripted_turn(state)

        assert outcome.accepted
        assert outcome.agent_id == 1
        assert outcome.collected is not None
        assert state.current_agent().id == 0

    def test_stops_at_human_seat(self):
        state = new_game(width=20, height=20, seed=42)
        state.turn_cursor = 1

        outcomes = run_scripted_turns(state)

        assert [o.agent_id for o in outcomes][:3] == [1, 2, 3]
        assert state.is_terminal or state.current_agent().is_human

    def test_nothing_to_do_on_human_turn(self):
        state = new_game(width=20, height=20, seed=42)
        assert run_scripted_turns(state) == []
        assert state.turn_count == 0

    def test_max_turns(self):
        state = new_game(width=30, height=30, seed=5, human_seats=())
        outcomes = run_scripted_turns(state, max_turns=10)
        assert len(outcomes) == 10
        assert state.turn_count == 10

    def test_headless_game_is_deterministic(self):
        first = new_game(width=15, height=15, seed=9, human_seats=())
        second = new_game(width=15, height=15, seed=9, human_seats=())

        run_scripted_turns(first, max_turns=200)
        run_scripted_turns(second, max_turns=200)

        assert first == second

    def test_plays_to_completion(self, make_world):
        """Two scripted agents next to each other fight until one remains."""
        state = make_world([".."], [(0, 0), (1, 0)], human_seats=())

        outcomes = run_scripted_turns(state, max_turns=500)

        assert state.is_terminal
        assert outcomes[-1].combat is not None
        assert outcomes[-1].combat.eliminated
        assert winner(state) == outcomes[-1].agent_id

        before = copy.deepcopy(state)
        outcome = submit_move(state, winner(state), "left")
        assert outcome.rejection == RejectionType.GAME_OVER
        assert state == before

    def test_scripted_turn_after_game_over(self, make_world):
        state = make_world([".."], [(0, 0), (1, 0)])
        state.remove_agent(1)

        outcome = play_scripted_turn(state)

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.GAME_OVER
        assert outcome.agent_id == 0
