"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...utils.constants import MAP_HEIGHT, MAP_WIDTH, MAX_AGENTS, SCRIPTED_TURN_DELAY


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    width: int = Field(default=MAP_WIDTH, gt=0, description="Grid width")
    height: int = Field(default=MAP_HEIGHT, gt=0, description="Grid height")
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")
    numAgents: int = Field(  # noqa: N815
        default=MAX_AGENTS, ge=2, le=4, description="Number of agents (human is agent 0)"
    )
    aiDelay: float = Field(  # noqa: N815
        default=SCRIPTED_TURN_DELAY,
        ge=0,
        description="Seconds before each scripted turn (0 runs them immediately)",
    )


class SubmitMoveRequest(BaseModel):
    """Request to move the human agent one step."""

    direction: str = Field(description="Direction: 'up', 'down', 'left' or 'right'")
