"""Tests for game sessions and scripted-turn scheduling."""

import asyncio

import pytest

from gridrivals.errors import ConfigurationError, RejectionType
from gridrivals.models import Agent, ControlMode
from gridrivals.server.session import MAX_INLINE_SCRIPTED_TURNS, GameSession, GameSessionManager


class FakeSocket:
    """Collects broadcast messages."""

    def __init__(self, fail=False):
        self.fail = fail
        self.messages = []

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("connection closed")
        self.messages.append(message)


@pytest.fixture
def make_session(make_world):
    def factory(ai_delay=0.0):
        state = make_world([".....", ".....", "....."], [(0, 0), (4, 2)])
        return GameSession(
            id="game-test", state=state, width=5, height=3, num_agents=2, ai_delay=ai_delay
        )

    return factory


class TestGameSession:
    """Test one session's turn flow."""

    def test_phase(self, make_session):
        session = make_session()
        assert session.phase == "AWAITING_MOVE"
        session.state.advance_turn()
        assert session.phase == "AI_THINKING"
        session.state.remove_agent(1)
        assert session.phase == "COMPLETED"

    def test_inline_scripted_turns(self, make_session):
        """With no delay the scripted agents play before the call returns."""
        session = make_session(ai_delay=0)
        socket = FakeSocket()
        session.add_connection(socket)

        outcome, scripted = asyncio.run(session.submit_human_move("right"))

        assert outcome.accepted
        assert [o.agent_id for o in scripted] == [1]
        assert session.state.current_agent().id == 0
        assert session.state.turn_count == 2
        assert [m["type"] for m in socket.messages] == ["TURN_EXECUTED", "TURN_EXECUTED"]

    def test_rejected_move_starts_nothing(self, make_session):
        session = make_session(ai_delay=0)

        outcome, scripted = asyncio.run(session.submit_human_move("north-east"))

        assert outcome.rejection == RejectionType.INVALID_DIRECTION
        assert scripted == []
        assert session.state.turn_count == 0
        assert session.scripted_task is None

    def test_delayed_scripted_turns(self, make_session):
        session = make_session(ai_delay=0.01)

        async def play():
            outcome, scripted = await session.submit_human_move("down")
            assert scripted == []
            await session.scripted_task

        asyncio.run(play())

        assert session.state.turn_count == 2
        assert session.phase == "AWAITING_MOVE"

    def test_restart_cancels_pending_turns(self, make_session):
        """A scripted turn queued before a restart never touches either world."""
        session = make_session(ai_delay=10)
        old_state = session.state

        async def play():
            await session.submit_human_move("right")
            task = session.scripted_task
            await session.restart(seed=3)
            await asyncio.sleep(0)
            return task

        task = asyncio.run(play())

        assert task.cancelled()
        assert old_state.turn_count == 1
        assert session.state is not old_state
        assert session.state.seed == 3
        assert session.state.turn_count == 0
        assert (session.state.grid.width, session.state.grid.height) == (5, 3)
        assert session.generation == 1

    def test_stale_turn_is_dropped(self, make_session):
        session = make_session(ai_delay=0.01)
        session.state.advance_turn()
        session.generation = 2

        asyncio.run(session._scripted_loop(generation=1))

        assert session.state.turn_count == 1
        assert session.state.current_agent().id == 1

    def test_game_over_announced(self, make_session):
        session = make_session(ai_delay=0)
        socket = FakeSocket()
        session.add_connection(socket)
        session.state.remove_agent(1)

        asyncio.run(session.start_scripted_turns())

        assert socket.messages[-1] == {"type": "GAME_OVER", "winner": 0, "turn": 0}

    def test_broadcast_drops_failed_sockets(self, make_session):
        session = make_session()
        good, bad = FakeSocket(), FakeSocket(fail=True)
        session.add_connection(good)
        session.add_connection(bad)

        asyncio.run(session.broadcast({"type": "PING"}))

        assert session.connections == [good]
        assert good.messages == [{"type": "PING"}]

    def test_human_eliminated_without_delay(self, make_world):
        """Each later move request plays another batch until the game ends.

        Agents 1 and 2 are walled apart by water, so no batch can finish the game.
        """
        state = make_world(["..~..", "..~.."], [(0, 0), (1, 1), (4, 0)])
        state.replace_agent(Agent(id=0, x=0, y=0, control=ControlMode.HUMAN, health=1))
        session = GameSession(
            id="game-test", state=state, width=5, height=2, num_agents=3, ai_delay=0
        )

        outcome, scripted = asyncio.run(session.submit_human_move("down"))

        assert outcome.accepted
        assert scripted[0].combat.eliminated
        assert len(scripted) == MAX_INLINE_SCRIPTED_TURNS
        assert session.phase == "ELIMINATED"
        assert not session.state.is_terminal
        turns = session.state.turn_count

        outcome, scripted = asyncio.run(session.submit_human_move("down"))

        assert outcome.rejection == RejectionType.ELIMINATED
        assert len(scripted) == MAX_INLINE_SCRIPTED_TURNS
        assert session.state.turn_count == turns + MAX_INLINE_SCRIPTED_TURNS
        assert session.phase == "ELIMINATED"


class TestGameSessionManager:
    """Test session bookkeeping."""

    def test_create_and_get(self):
        manager = GameSessionManager()
        session = manager.create_session(width=12, height=8, seed=42, num_agents=3)

        assert session.id.startswith("game-")
        assert manager.get(session.id) is session
        assert session.state.seed == 42
        assert len(session.state.agents) == 3
        assert session.state.agents[0].is_human

    def test_invalid_roster(self):
        with pytest.raises(ConfigurationError):
            GameSessionManager().create_session(width=10, height=10, num_agents=6)

    def test_delete_cancels_task(self):
        manager = GameSessionManager()

        async def play():
            session = manager.create_session(width=10, height=10, seed=1, ai_delay=10)
            session.state.advance_turn()
            await session.start_scripted_turns()
            task = session.scripted_task
            assert manager.delete(session.id)
            await asyncio.sleep(0)
            return task

        task = asyncio.run(play())

        assert task.cancelled()
        assert manager.sessions == {}
        assert not manager.delete("game-missing")
