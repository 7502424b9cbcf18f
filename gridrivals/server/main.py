"""FastAPI server for Grid Rivals.

Provides HTTP/WebSocket API for a human player (agent 0) against scripted agents.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

from ..errors import ConfigurationError
from ..utils.serialization import serialize_outcome
from .schemas.requests import CreateGameRequest, SubmitMoveRequest
from .schemas.responses import (
    CreateGameResponse,
    GameStateResponse,
    SubmitMoveResponse,
)
from .session import HUMAN_AGENT_ID, GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Grid Rivals server starting...")
    yield
    logger.info("Grid Rivals server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Grid Rivals API",
    description="Web API for human vs scripted agents in Grid Rivals",
    version="1.0.0",
    lifespan=lifespan,
)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


def _state_response(session: GameSession) -> GameStateResponse:
    return GameStateResponse(
        gameId=session.id,
        turn=session.state.turn_count,
        phase=session.phase,
        currentAgent=None if session.state.is_terminal else session.state.current_agent().id,
        winner=session.state.winner_id,
        state=session.get_state(),
    )


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Grid Rivals",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game.

    Example:
        POST /api/games
        {"width": 40, "height": 30, "seed": 42, "numAgents": 4, "aiDelay": 0.5}
    """
    try:
        session = sessions.create_session(
            width=request.width,
            height=request.height,
            seed=request.seed,
            num_agents=request.numAgents,
            ai_delay=request.aiDelay,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CreateGameResponse(
        gameId=session.id,
        humanAgent=HUMAN_AGENT_ID,
        seed=session.state.seed,
        state=session.get_state(),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state."""
    return _state_response(_get_session(game_id))


@app.post("/api/games/{game_id}/moves", response_model=SubmitMoveResponse)
async def submit_move(game_id: str, request: SubmitMoveRequest):
    """Move the human agent one step, then let the scripted agents play.

    Illegal moves (wrong turn, water, unknown direction, finished game) come
    back with ``accepted: false`` and leave the game unchanged. After the
    human is eliminated, a request with no scripted delay is still rejected
    but plays the next batch of scripted turns and returns them as events.

    Example:
        POST /api/games/game-abc123/moves
        {"direction": "left"}
    """
    session = _get_session(game_id)

    logger.info(f"Game {game_id}: human move {request.direction!r}")
    outcome, scripted = await session.submit_human_move(request.direction)

    # A forced pass uses the turn like an accepted move
    used_turn = outcome.accepted or outcome.forced_pass
    events = [outcome, *scripted] if used_turn else scripted

    current = None if session.state.is_terminal else session.state.current_agent().id
    return SubmitMoveResponse(
        accepted=outcome.accepted,
        turn=session.state.turn_count,
        currentAgent=current,
        winner=session.state.winner_id,
        events=[serialize_outcome(o) for o in events],
        errors=[] if used_turn else [outcome.reason],
    )


@app.post("/api/games/{game_id}/restart", response_model=GameStateResponse)
async def restart_game(game_id: str, seed: int | None = None):
    """Replace the game with a fresh map and roster."""
    session = _get_session(game_id)
    await session.restart(seed=seed)
    return _state_response(session)


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    raise HTTPException(status_code=404, detail="Game not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/games/{game_id}")
async def websocket_endpoint(websocket: WebSocket, game_id: str):
    """WebSocket connection for real-time game updates.

    Clients receive:
    - CONNECTED: Initial connection confirmation with state
    - TURN_EXECUTED: Move outcomes and the new state
    - GAME_OVER: Game ended
    - GAME_RESTARTED: World replaced by a new game
    """
    session = sessions.get(game_id)
    if not session:
        await websocket.close(code=1008, reason="Game not found")
        return

    await websocket.accept()
    session.add_connection(websocket)

    try:
        await websocket.send_json(
            {
                "type": "CONNECTED",
                "gameId": game_id,
                "turn": session.state.turn_count,
                "state": session.get_state(),
            }
        )

        # Keep connection alive and handle client messages
        while True:
            data = await websocket.receive_json()
            if data.get("type") == "PING":
                await websocket.send_json({"type": "PONG"})

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from game {game_id}")
    except Exception as e:
        logger.error(f"WebSocket error in game {game_id}: {e}", exc_info=True)
    finally:
        session.remove_connection(websocket)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
