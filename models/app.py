"""
Application-level models: which screen is showing and what it needs.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from games.HeartCatch import config
from .heartcatch import SessionSnapshot


class Screen(str, Enum):
    """Top-level screens of the app.

    PROPOSAL -> NO -> PROPOSAL, PROPOSAL -> GAME -> GAMEOVER -> GAME (retry).
    """
    PROPOSAL = "proposal"
    NO = "no"
    GAME = "game"
    GAMEOVER = "gameover"


class ProposalChoice(str, Enum):
    """Answers offered on the proposal screen, in menu order."""
    YES = "yes"
    NO = "no"


class AppSnapshot(BaseModel):
    """Read-only view of the app for the screen renderers.

    Attributes:
        screen: Screen currently showing
        last_final_score: Score of the most recent finished session
        menu_index: Highlighted proposal option
        retry_ready: Retry prompt visible on the gameover screen
        screen_since: Scheduler time the current screen was entered
        session: Snapshot of the live session while on the game screen
        now: Scheduler time the snapshot was taken at
    """
    screen: Screen
    last_final_score: int = Field(default=0, ge=0)
    menu_index: int = Field(default=0, ge=0)
    retry_ready: bool = False
    screen_since: float = 0.0
    session: Optional[SessionSnapshot] = None
    now: float = 0.0

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def celebrating(self) -> bool:
        """Gameover after a winning score shows the celebration."""
        return self.screen == Screen.GAMEOVER and self.last_final_score >= config.WIN_SCORE
