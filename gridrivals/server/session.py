"""Game session management for one human against scripted agents."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from fastapi import WebSocket

from ..engine import (
    MoveOutcome,
    current_agent_id,
    new_game,
    play_scripted_turn,
    run_scripted_turns,
    submit_move,
)
from ..errors import RejectionType
from ..models import WorldState
from ..utils.constants import MAP_HEIGHT, MAP_WIDTH, MAX_AGENTS, SCRIPTED_TURN_DELAY
from ..utils.serialization import serialize_outcome, serialize_world

logger = logging.getLogger(__name__)

HUMAN_AGENT_ID = 0
MAX_INLINE_SCRIPTED_TURNS = 1000  # Bound for delay-0 runs once the human is out


@dataclass
class GameSession:
    """Manages one game session (human seat 0 vs scripted agents).

    Scripted turns run in a background task, one every ``ai_delay`` seconds,
    so connected clients can render each step. The task is cancelled when
    the game is restarted or deleted, and ``generation`` is bumped so a turn
    that wakes up late sees that its world was replaced and does nothing.
    """

    id: str
    state: WorldState
    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    num_agents: int = MAX_AGENTS
    ai_delay: float = SCRIPTED_TURN_DELAY
    connections: list[WebSocket] = field(default_factory=list)
    generation: int = 0
    scripted_task: asyncio.Task | None = None

    @property
    def phase(self) -> str:
        """Session phase: AWAITING_MOVE, AI_THINKING, ELIMINATED or COMPLETED.

        ELIMINATED means the human seat is out but the scripted agents are
        still playing.
        """
        agent_id = current_agent_id(self.state)
        if agent_id is None:
            return "COMPLETED"
        if self.human_eliminated:
            return "ELIMINATED"
        if agent_id == HUMAN_AGENT_ID:
            return "AWAITING_MOVE"
        return "AI_THINKING"

    @property
    def human_eliminated(self) -> bool:
        return self.state.agent_by_id(HUMAN_AGENT_ID) is None

    def get_state(self) -> dict:
        """Serialize the full game state for clients."""
        return serialize_world(self.state)

    async def submit_human_move(self, direction: str) -> tuple[MoveOutcome, list[MoveOutcome]]:
        """Apply the human's move, then start the scripted agents.

        Args:
            direction: Direction name from the client

        Returns:
            Tuple of (human move outcome, scripted outcomes already applied).
            The second list is only filled when ai_delay is 0; otherwise the
            scripted turns arrive over the WebSocket. Once the human seat is
            eliminated every call is rejected, and with ai_delay 0 it plays
            the next batch of scripted turns so the game can still finish.
        """
        outcome = submit_move(self.state, HUMAN_AGENT_ID, direction)
        if outcome.rejection == RejectionType.ELIMINATED and self.ai_delay <= 0:
            return outcome, await self.start_scripted_turns()
        if not outcome.accepted and not outcome.forced_pass:
            logger.info(f"Game {self.id}: human move rejected: {outcome.reason}")
            return outcome, []

        await self.broadcast(self._turn_message([outcome]))
        scripted = await self.start_scripted_turns()
        return outcome, scripted

    async def start_scripted_turns(self) -> list[MoveOutcome]:
        """Run scripted agents until the human is up again or the game ends."""
        if self.ai_delay <= 0:
            outcomes = run_scripted_turns(self.state, max_turns=MAX_INLINE_SCRIPTED_TURNS)
            if outcomes:
                await self.broadcast(self._turn_message(outcomes))
            await self._announce_if_over()
            return outcomes

        self.cancel_scripted_turns()
        self.scripted_task = asyncio.create_task(self._scripted_loop(self.generation))
        return []

    async def _scripted_loop(self, generation: int) -> None:
        while True:
            await asyncio.sleep(self.ai_delay)
            # Drop the turn if the world was replaced while we slept
            if generation != self.generation:
                return
            agent_id = current_agent_id(self.state)
            if agent_id is None or agent_id == HUMAN_AGENT_ID:
                break
            outcome = play_scripted_turn(self.state)
            await self.broadcast(self._turn_message([outcome]))

        await self._announce_if_over()

    def cancel_scripted_turns(self) -> None:
        """Abandon any pending scripted turn."""
        if self.scripted_task is not None and not self.scripted_task.done():
            self.scripted_task.cancel()
            logger.info(f"Game {self.id}: cancelled pending scripted turns")
        self.scripted_task = None

    async def restart(self, seed: int | None = None) -> None:
        """Replace the world with a fresh game."""
        self.generation += 1
        self.cancel_scripted_turns()
        self.state = new_game(
            width=self.width,
            height=self.height,
            seed=seed,
            num_agents=self.num_agents,
            human_seats=(HUMAN_AGENT_ID,),
        )
        logger.info(f"Game {self.id} restarted with seed {self.state.seed}")
        await self.broadcast({"type": "GAME_RESTARTED", "state": self.get_state()})

    async def _announce_if_over(self) -> None:
        if self.state.is_terminal:
            logger.info(f"Game {self.id} ended: winner = agent {self.state.winner_id}")
            await self.broadcast(
                {"type": "GAME_OVER", "winner": self.state.winner_id, "turn": self.state.turn_count}
            )

    def _turn_message(self, outcomes: list[MoveOutcome]) -> dict:
        return {
            "type": "TURN_EXECUTED",
            "events": [serialize_outcome(o) for o in outcomes],
            "state": self.get_state(),
        }

    async def broadcast(self, message: dict):
        """Send message to all connected WebSocket clients.

        Args:
            message: Dictionary to send as JSON
        """
        disconnected = []
        for ws in self.connections:
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.warning(f"Failed to send to WebSocket: {e}")
                disconnected.append(ws)

        # Remove disconnected clients
        for ws in disconnected:
            self.connections.remove(ws)

    def add_connection(self, websocket: WebSocket):
        """Add a WebSocket connection to this session."""
        self.connections.append(websocket)
        logger.info(f"WebSocket connected to game {self.id}, total: {len(self.connections)}")

    def remove_connection(self, websocket: WebSocket):
        """Remove a WebSocket connection from this session."""
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(
                f"WebSocket disconnected from game {self.id}, remaining: {len(self.connections)}"
            )


class GameSessionManager:
    """Manages all active game sessions (in memory)."""

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        width: int = MAP_WIDTH,
        height: int = MAP_HEIGHT,
        seed: int | None = None,
        num_agents: int = MAX_AGENTS,
        ai_delay: float = SCRIPTED_TURN_DELAY,
    ) -> GameSession:
        """Create a new game session.

        Args:
            width: Grid width
            height: Grid height
            seed: Optional RNG seed for determinism
            num_agents: Roster size (2-4), agent 0 is the human
            ai_delay: Seconds before each scripted turn

        Returns:
            Newly created GameSession

        Raises:
            ConfigurationError: If the game parameters are invalid
        """
        game_id = f"game-{uuid.uuid4().hex[:8]}"

        state = new_game(
            width=width,
            height=height,
            seed=seed,
            num_agents=num_agents,
            human_seats=(HUMAN_AGENT_ID,),
        )

        session = GameSession(
            id=game_id,
            state=state,
            width=width,
            height=height,
            num_agents=num_agents,
            ai_delay=ai_delay,
        )
        self.sessions[game_id] = session

        logger.info(
            f"Created game {game_id}: {width}x{height}, {num_agents} agents, "
            f"seed={state.seed}, ai_delay={ai_delay}"
        )

        return session

    def get(self, game_id: str) -> GameSession | None:
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session, cancelling its scripted turns.

        Returns:
            True if deleted, False if not found
        """
        session = self.sessions.pop(game_id, None)
        if session is None:
            return False
        session.generation += 1
        session.cancel_scripted_turns()
        logger.info(f"Deleted game {game_id}")
        return True

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        for game_id in list(self.sessions):
            self.delete(game_id)
