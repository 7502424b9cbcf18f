"""Tests for action resolution."""

import copy

from gridrivals.engine import apply_move
from gridrivals.errors import RejectionType
from gridrivals.models import Direction, Resource


class TestBlockedMoves:
    """Moves that are rejected leave the world untouched."""

    def test_move_into_water_rejected(self, make_world):
        """2x1 grid: moving right into water is rejected and the turn stays."""
        state = make_world([".~"], [(0, 0), (0, 0)])
        before = copy.deepcopy(state)

        outcome = apply_move(state, 0, 1, 0)

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.BLOCKED_BY_WATER
        assert outcome.direction == Direction.RIGHT
        assert outcome.destination == (0, 0)
        assert state == before
        assert state.current_agent().id == 0

    def test_not_your_turn(self, make_world):
        state = make_world(["..."], [(0, 0), (2, 0)])
        before = copy.deepcopy(state)

        outcome = apply_move(state, 1, -1, 0)

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.NOT_YOUR_TURN
        assert "agent 0" in outcome.reason
        assert state == before

    def test_eliminated_agent(self, make_world):
        state = make_world(["..."], [(0, 0), (1, 0), (2, 0)])
        state.remove_agent(1)
        before = copy.deepcopy(state)

        outcome = apply_move(state, 1, 1, 0)

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.ELIMINATED
        assert "eliminated" in outcome.reason
        assert state == before

    def test_invalid_delta(self, make_world):
        state = make_world(["..."], [(0, 0), (2, 0)])
        before = copy.deepcopy(state)

        for dx, dy in [(0, 0), (1, 1), (2, 0), (0, -3)]:
            outcome = apply_move(state, 0, dx, dy)
            assert outcome.rejection == RejectionType.INVALID_DIRECTION

        assert state == before

    def test_move_after_game_over(self, make_world):
        state = make_world(["..."], [(0, 0), (2, 0)])
        state.remove_agent(1)
        before = copy.deepcopy(state)

        outcome = apply_move(state, 0, 1, 0)

        assert not outcome.accepted
        assert outcome.rejection == RejectionType.GAME_OVER
        assert "agent 0" in outcome.reason
        assert state == before


class TestAcceptedMoves:
    """Moves that are applied."""

    def test_collect_gold_then_fight(self, make_world):
        """2x1 grid: gold is picked up, then the occupant is attacked.

        Pickup gives experience 1. Attack 1*10 + 1 = 11 against defense
        1*5 + 0 = 5 deals 6 damage and adds 2 more experience.
        """
        state = make_world([".$"], [(0, 0), (1, 0)])

        outcome = apply_move(state, 0, 1, 0)

        assert outcome.accepted
        assert outcome.collected == Resource.GOLD
        assert state.grid.tile_at(1, 0).resource is None

        mover = state.agent_by_id(0)
        assert mover.position == (1, 0)
        assert mover.resources[Resource.GOLD] == 1
        assert mover.experience == 3

        assert outcome.combat is not None
        assert outcome.combat.damage == 6
        assert state.agent_by_id(1).health == 94
        assert state.current_agent().id == 1
        assert state.turn_count == 1

    def test_collect_without_opponent(self, make_world):
        state = make_world([".$.."], [(0, 0), (3, 0)])

        outcome = apply_move(state, 0, 1, 0)

        mover = state.agent_by_id(0)
        assert outcome.collected == Resource.GOLD
        assert outcome.combat is None
        assert mover.resources[Resource.GOLD] == 1
        assert mover.experience == 1

    def test_resource_collected_once(self, make_world):
        """A second visit to an emptied tile collects nothing."""
        state = make_world(["%..", "..."], [(0, 0), (2, 1)])

        apply_move(state, 0, 1, 0)  # agent 0 -> (1, 0)
        apply_move(state, 1, 0, -1)  # agent 1 -> (2, 0)
        first = apply_move(state, 0, -1, 0)  # agent 0 -> (0, 0), food
        apply_move(state, 1, 0, 1)
        apply_move(state, 0, 1, 0)
        apply_move(state, 1, 0, -1)
        second = apply_move(state, 0, -1, 0)

        assert first.collected == Resource.FOOD
        assert second.collected is None
        assert state.agent_by_id(0).resources[Resource.FOOD] == 11
        assert state.agent_by_id(0).experience == 1

    def test_edge_move_stays_put(self, make_world):
        """Moving off the grid clamps onto the agent's own cell and uses the turn."""
        state = make_world(["..."], [(0, 0), (2, 0)])

        outcome = apply_move(state, 0, -1, 0)

        assert outcome.accepted
        assert outcome.origin == outcome.destination == (0, 0)
        assert state.current_agent().id == 1
        assert state.turn_count == 1

    def test_mountain_is_passable(self, make_world):
        state = make_world([".^"], [(0, 0), (0, 0)])
        outcome = apply_move(state, 0, 1, 0)
        assert outcome.accepted
        assert state.agent_by_id(0).position == (1, 0)

    def test_turn_order_cycles(self, make_world):
        state = make_world(["....", "...."], [(0, 0), (3, 0), (0, 1)])

        apply_move(state, 0, 1, 0)
        apply_move(state, 1, 0, 1)
        apply_move(state, 2, 1, 0)

        assert state.current_agent().id == 0
        assert state.turn_count == 3

    def test_pickup_counts_toward_attack(self, make_world):
        """A weapon collected on arrival is used in the fight that follows."""
        state = make_world([".!"], [(0, 0), (1, 0)])

        outcome = apply_move(state, 0, 1, 0)

        # weapon 2, experience 1: 21 vs 5
        assert outcome.combat.attack_power == 21
        assert outcome.combat.damage == 16
