"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    turn: int
    phase: str
    currentAgent: int | None  # noqa: N815
    winner: int | None
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    humanAgent: int  # noqa: N815
    seed: int
    state: dict


class SubmitMoveResponse(BaseModel):
    """Response after submitting a move."""

    accepted: bool
    turn: int
    currentAgent: int | None = None  # noqa: N815
    winner: int | None = None
    events: list[dict] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
