"""Game engine components."""

from .actions import MoveOutcome, apply_move
from .combat import CombatEvent, CombatResult, resolve_combat
from .decision import decide
from .map_generator import generate_grid, new_game
from .turn_executor import (
    current_agent_id,
    is_stranded,
    play_scripted_turn,
    run_scripted_turns,
    submit_move,
)
from .victory import is_terminal, winner

__all__ = [
    "CombatEvent",
    "CombatResult",
    "MoveOutcome",
    "apply_move",
    "current_agent_id",
    "decide",
    "generate_grid",
    "is_stranded",
    "is_terminal",
    "new_game",
    "play_scripted_turn",
    "resolve_combat",
    "run_scripted_turns",
    "submit_move",
    "winner",
]
