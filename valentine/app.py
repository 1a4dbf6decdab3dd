"""
Valentine App - the screen state machine.

    PROPOSAL --yes--> GAME --outcome--> GAMEOVER --retry (lost only)--> GAME
    PROPOSAL --no---> NO --3.5s--> PROPOSAL

The app owns the shared TickScheduler and, while on the game screen,
exactly one HeartCatch session. Transitions are explicit methods that
return the screen now showing; calls that do not apply to the current
screen are ignored and return it unchanged.

Timers owned by the app itself are tagged ``screen/no`` and
``screen/gameover``; session timers live under the session's own tag and
are torn down before the game screen is left.
"""
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from games.HeartCatch import config as game_config
from games.HeartCatch import game_info
from games.HeartCatch.game_mode import HeartCatchMode
from models import AppSnapshot, Outcome, ProposalChoice, Screen
from valentine import config
from valentine.input import KeyEvent
from valentine.input.input_event import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_LEFT,
    KEY_QUIT,
    KEY_RIGHT,
    KEY_UP,
)
from valentine.logging import get_logger
from valentine.scheduler import TickScheduler

log = get_logger('app')

NO_SCREEN_TAG = 'screen/no'
GAMEOVER_TAG = 'screen/gameover'

SessionFactory = Callable[..., HeartCatchMode]


@dataclass
class AppState:
    """Process-wide app state.

    Attributes:
        screen: Screen currently showing
        last_final_score: Score of the most recent finished session
        menu_index: Highlighted proposal option
        retry_ready: Whether the gameover retry prompt is showing
        quit_requested: Set once the user asked to leave
        screen_since: Scheduler time the current screen was entered
    """
    screen: Screen = Screen.PROPOSAL
    last_final_score: int = 0
    menu_index: int = 0
    retry_ready: bool = False
    quit_requested: bool = False
    screen_since: float = 0.0


class ValentineApp:
    """Sequences the proposal, the interstitials and the mini-game."""

    def __init__(
        self,
        scheduler: Optional[TickScheduler] = None,
        rng: Optional[random.Random] = None,
        reset_score_on_retry: bool = config.RESET_SCORE_ON_RETRY,
        session_factory: Optional[SessionFactory] = None,
    ):
        """Initialize the app on the proposal screen.

        Args:
            scheduler: Scheduler to run on (a new one if omitted)
            rng: Random source handed to every game session
            reset_score_on_retry: Zero the last score before a retry
            session_factory: Builds game sessions (defaults to the
                HeartCatch game_info factory)
        """
        self.scheduler = scheduler or TickScheduler()
        self.state = AppState()
        self._rng = rng
        self._reset_score_on_retry = reset_score_on_retry
        self._session_factory = session_factory or game_info.get_game_mode
        self._session: Optional[HeartCatchMode] = None
        self._sessions_started = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def screen(self) -> Screen:
        return self.state.screen

    @property
    def session(self) -> Optional[HeartCatchMode]:
        """The live game session, only while on the game screen."""
        return self._session

    @property
    def sessions_started(self) -> int:
        return self._sessions_started

    @property
    def running(self) -> bool:
        return not self.state.quit_requested

    @property
    def celebrating(self) -> bool:
        return (self.state.screen == Screen.GAMEOVER
                and self.state.last_final_score >= game_config.WIN_SCORE)

    # =========================================================================
    # Transitions
    # =========================================================================

    def _set_screen(self, screen: Screen) -> Screen:
        if screen != self.state.screen:
            log.info("screen %s -> %s", self.state.screen.value, screen.value)
            self.state.screen_since = self.scheduler.now
        self.state.screen = screen
        return screen

    def select(self, choice: ProposalChoice) -> Screen:
        """Answer the proposal."""
        if self.state.screen != Screen.PROPOSAL:
            return self.state.screen
        if choice == ProposalChoice.YES:
            return self._enter_game()
        return self._enter_no()

    def _enter_no(self) -> Screen:
        self.scheduler.cancel_tag(NO_SCREEN_TAG)
        self.scheduler.after(config.NO_SCREEN_DURATION, self.return_to_proposal,
                             tag=NO_SCREEN_TAG, name='no_screen_return')
        return self._set_screen(Screen.NO)

    def return_to_proposal(self) -> Screen:
        """Leave the "no" interstitial."""
        if self.state.screen != Screen.NO:
            return self.state.screen
        self.scheduler.cancel_tag(NO_SCREEN_TAG)
        self.state.menu_index = 0
        return self._set_screen(Screen.PROPOSAL)

    def _enter_game(self) -> Screen:
        self._teardown_session()
        self._sessions_started += 1
        self._session = self._session_factory(
            scheduler=self.scheduler,
            on_finished=self.finish_game,
            rng=self._rng,
        )
        self._session.start()
        return self._set_screen(Screen.GAME)

    def finish_game(self, outcome: Outcome, final_score: int) -> Screen:
        """Receive the session outcome and show the gameover screen."""
        if self.state.screen != Screen.GAME:
            return self.state.screen
        self._teardown_session()
        self.state.last_final_score = final_score
        self.state.retry_ready = False
        log.info("round %s with %d points", outcome.value, final_score)
        if final_score < game_config.WIN_SCORE:
            self.scheduler.after(config.RETRY_PROMPT_DELAY, self._show_retry,
                                 tag=GAMEOVER_TAG, name='retry_prompt')
        return self._set_screen(Screen.GAMEOVER)

    def _show_retry(self) -> None:
        if self.state.screen == Screen.GAMEOVER and not self.celebrating:
            self.state.retry_ready = True

    def retry(self) -> Screen:
        """Play again after a loss, once the retry prompt is showing."""
        if (self.state.screen != Screen.GAMEOVER or self.celebrating
                or not self.state.retry_ready):
            return self.state.screen
        self.scheduler.cancel_tag(GAMEOVER_TAG)
        self.state.retry_ready = False
        if self._reset_score_on_retry:
            self.state.last_final_score = 0
        return self._enter_game()

    def request_quit(self) -> None:
        """Stop everything; the host loop exits once ``running`` is False."""
        if self.state.quit_requested:
            return
        log.info("quit requested on %s", self.state.screen.value)
        self._teardown_session()
        self.scheduler.cancel_all()
        self.state.quit_requested = True

    def _teardown_session(self) -> None:
        if self._session is not None:
            self._session.stop()
            self._session = None

    # =========================================================================
    # Input / update
    # =========================================================================

    def handle_input(self, events: List[KeyEvent]) -> None:
        """Route key events to the current screen."""
        for event in events:
            if not self.running:
                return
            if event.key == KEY_QUIT and self.state.screen != Screen.NO:
                self.request_quit()
                continue

            screen = self.state.screen
            if screen == Screen.PROPOSAL:
                self._handle_proposal_key(event.key)
            elif screen == Screen.GAME and self._session is not None:
                self._session.handle_input([event])
            elif screen == Screen.GAMEOVER and event.key == KEY_ENTER:
                self.retry()

    def _handle_proposal_key(self, key: str) -> None:
        count = len(config.PROPOSAL_OPTIONS)
        if key in (KEY_UP, KEY_LEFT):
            self.state.menu_index = (self.state.menu_index - 1) % count
        elif key in (KEY_DOWN, KEY_RIGHT):
            self.state.menu_index = (self.state.menu_index + 1) % count
        elif key == KEY_ENTER:
            value = config.PROPOSAL_OPTIONS[self.state.menu_index][0]
            self.select(ProposalChoice(value))

    def update(self, dt: float) -> None:
        """Advance all timers by ``dt`` seconds."""
        if self.running:
            self.scheduler.advance(dt)

    # =========================================================================
    # Output
    # =========================================================================

    def snapshot(self) -> AppSnapshot:
        return AppSnapshot(
            screen=self.state.screen,
            last_final_score=self.state.last_final_score,
            menu_index=self.state.menu_index,
            retry_ready=self.state.retry_ready,
            screen_since=self.state.screen_since,
            session=self._session.snapshot() if self._session is not None else None,
            now=self.scheduler.now,
        )
