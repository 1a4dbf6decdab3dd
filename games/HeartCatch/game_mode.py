"""
HeartCatch Game Mode

Catch falling hearts in a basket before the clock runs out. Good hearts
build a combo, broken hearts cost points, and the occasional power-up
slows time, doubles hearts or magnetises the basket. Reach 100 love
points to win.

One HeartCatchMode is one game session:

    COUNTDOWN (3..0) -> PLAYING (60s) -> WON | LOST

Every timed behaviour is a timer on the shared TickScheduler, tagged under
``session-<n>``. Finishing a round cancels the ``session-<n>/playing``
timers; ``stop()`` cancels everything the session owns.
"""
import itertools
import random
from typing import Callable, List, Optional

from games.HeartCatch import config
from games.HeartCatch.collectible import (
    Collectible,
    PowerUpPickup,
    catch_radius,
    fall_speed,
    pickup_speed,
)
from games.HeartCatch.powerups import PowerUpState
from games.HeartCatch.scoring import ScoreTracker
from games.HeartCatch.spawner import HeartSpawner
from models.heartcatch import (
    ActivePowerUp,
    Outcome,
    PowerUpKind,
    ScoreData,
    SessionPhase,
    SessionSnapshot,
)
from valentine.input import KeyEvent
from valentine.input.input_event import KEY_LEFT, KEY_RIGHT
from valentine.logging import get_logger
from valentine.scheduler import TickScheduler

log = get_logger('heart_catch')

OutcomeCallback = Callable[[Outcome, int], None]

_session_ids = itertools.count(1)


class HeartCatchMode:
    """HeartCatch game mode - one countdown-to-outcome session.

    Features:
    - Difficulty bands driven by remaining time
    - Combo bonus for consecutive good catches
    - Rose / love letter / magnet power-ups, one at a time
    - Instant win on reaching the goal score
    """

    # Game metadata
    NAME = "Heart Catch"
    DESCRIPTION = "Catch 100 love points of falling hearts before time runs out."
    VERSION = "1.0.0"
    AUTHOR = "Valentine Team"

    def __init__(
        self,
        scheduler: TickScheduler,
        on_finished: Optional[OutcomeCallback] = None,
        rng: Optional[random.Random] = None,
        session_id: Optional[int] = None,
    ):
        """Initialize a session. Call ``start()`` to begin the countdown.

        Args:
            scheduler: Shared scheduler driving every timer
            on_finished: Called with (outcome, final_score) after the
                post-round pause
            rng: Random source for spawns (tests pass a seeded one)
            session_id: Tag number; allocated automatically if omitted
        """
        self._scheduler = scheduler
        self._on_finished = on_finished
        self._session_id = session_id if session_id is not None else next(_session_ids)
        self._tag = f"session-{self._session_id}"
        self._log = log.bind(self._tag)

        self._phase = SessionPhase.COUNTDOWN
        self._countdown = config.COUNTDOWN_START
        self._time_left = config.ROUND_TIME
        self._player_x = config.PLAYER_START_X

        self._collectibles: List[Collectible] = []
        self._pickups: List[PowerUpPickup] = []
        self._power_up = PowerUpState()
        self._score = ScoreTracker()
        self._spawner = HeartSpawner(rng)

        self._outcome: Optional[Outcome] = None
        self._started = False
        self._reported = False

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def tag(self) -> str:
        """Scheduler tag owning every timer of this session."""
        return self._tag

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def countdown_value(self) -> int:
        return self._countdown

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def player_x(self) -> float:
        return self._player_x

    @property
    def collectibles(self) -> List[Collectible]:
        return list(self._collectibles)

    @property
    def pickups(self) -> List[PowerUpPickup]:
        return list(self._pickups)

    @property
    def active_power_up(self) -> Optional[ActivePowerUp]:
        return self._power_up.active

    @property
    def score_data(self) -> ScoreData:
        return self._score.get_stats()

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    @property
    def reported(self) -> bool:
        return self._reported

    def get_score(self) -> int:
        """Get current score."""
        return self._score.score

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        """Begin the countdown."""
        if self._started:
            return
        self._started = True
        self._log.info("countdown from %d", self._countdown)
        self._scheduler.every(
            config.CLOCK_INTERVAL, self._on_countdown_tick,
            tag=f"{self._tag}/countdown", name='countdown',
        )

    def stop(self) -> None:
        """Tear down every timer this session owns."""
        cancelled = self._scheduler.cancel_tag(self._tag)
        self._log.debug("stopped (%d timers cancelled)", cancelled)

    def _on_countdown_tick(self) -> None:
        if self._phase != SessionPhase.COUNTDOWN:
            return
        self._countdown -= 1
        if self._countdown <= 0:
            self._countdown = 0
            self._scheduler.cancel_tag(f"{self._tag}/countdown")
            self._start_playing()

    def _start_playing(self) -> None:
        self._phase = SessionPhase.PLAYING
        self._time_left = config.ROUND_TIME
        self._log.info("playing, %ds on the clock", self._time_left)

        playing = f"{self._tag}/playing"
        self._scheduler.every(config.CLOCK_INTERVAL, self._on_clock_tick,
                              tag=playing, name='round_clock')
        self._scheduler.every(config.TICK_INTERVAL, self.step,
                              tag=playing, name='simulation_step')
        self._scheduler.every(config.POWER_UP_POLL_INTERVAL, self._on_power_up_poll,
                              tag=playing, name='power_up_poll')
        self._scheduler.every(config.PICKUP_SPAWN_INTERVAL, self._on_pickup_spawn_tick,
                              tag=playing, name='pickup_spawn')
        self._schedule_heart_spawn()

    def _schedule_heart_spawn(self) -> None:
        # Re-armed after each spawn so the cadence follows the difficulty band
        self._scheduler.after(
            self._spawner.spawn_interval(self._time_left), self._on_heart_spawn_tick,
            tag=f"{self._tag}/playing", name='heart_spawn',
        )

    def _finish(self, outcome: Outcome) -> None:
        if self._phase != SessionPhase.PLAYING:
            return
        self._phase = SessionPhase.WON if outcome == Outcome.WON else SessionPhase.LOST
        self._outcome = outcome
        self._scheduler.cancel_tag(f"{self._tag}/playing")
        self._log.info("%s with %d points (%ds left)",
                       outcome.value, self.get_score(), self._time_left)
        self._scheduler.after(
            config.OUTCOME_REPORT_DELAY, self._report_outcome,
            tag=f"{self._tag}/outcome", name='report_outcome',
        )

    def _report_outcome(self) -> None:
        if self._reported or self._outcome is None:
            return
        self._reported = True
        if self._on_finished is not None:
            self._on_finished(self._outcome, self.get_score())

    # =========================================================================
    # Timers
    # =========================================================================

    def _on_clock_tick(self) -> None:
        if self._phase != SessionPhase.PLAYING:
            return
        self._time_left = max(0, self._time_left - 1)
        if self._time_left == 0:
            won = self._score.get_stats().reached_goal
            self._finish(Outcome.WON if won else Outcome.LOST)

    def _on_heart_spawn_tick(self) -> None:
        if self._phase != SessionPhase.PLAYING:
            return
        self._collectibles.append(self._spawner.spawn_heart(self._time_left))
        self._schedule_heart_spawn()

    def _on_pickup_spawn_tick(self) -> None:
        if self._phase != SessionPhase.PLAYING:
            return
        pickup = self._spawner.maybe_spawn_pickup()
        if pickup is not None:
            self._pickups.append(pickup)

    def _on_power_up_poll(self) -> None:
        self._power_up.expire(self._scheduler.now)

    # =========================================================================
    # Simulation
    # =========================================================================

    def step(self) -> None:
        """Advance one simulation tick.

        Every entity is judged against the basket position and power-up
        in effect when the tick began; pickups caught this tick take
        effect from the next one.
        """
        if self._phase != SessionPhase.PLAYING:
            return

        now = self._scheduler.now
        self._score = self._score.expire_combo(now)

        player_x = self._player_x
        power_up = self._power_up.kind

        self._collectibles = self._step_collectibles(player_x, power_up, now)
        self._pickups = self._step_pickups(player_x, power_up, now)

        if self._score.get_stats().reached_goal:
            self._finish(Outcome.WON)

    def _step_collectibles(
        self,
        player_x: float,
        power_up: Optional[PowerUpKind],
        now: float,
    ) -> List[Collectible]:
        speed = fall_speed(self._time_left, power_up)
        radius = catch_radius(power_up)
        survivors: List[Collectible] = []

        for heart in self._collectibles:
            if power_up == PowerUpKind.MAGNET and heart.is_good:
                heart.pull_toward(player_x)
            heart.fall(speed)

            if heart.is_caught_by(player_x, radius):
                value = heart.value_with(power_up)
                self._score = self._score.record_catch(value, now)
                self._log.trace("caught %s (%+d), score=%d combo=%d",
                                heart.kind.value, value, self._score.score, self._score.combo)
            elif not heart.is_off_screen:
                survivors.append(heart)

        return survivors

    def _step_pickups(
        self,
        player_x: float,
        power_up: Optional[PowerUpKind],
        now: float,
    ) -> List[PowerUpPickup]:
        speed = pickup_speed(power_up)
        survivors: List[PowerUpPickup] = []

        for pickup in self._pickups:
            pickup.fall(speed)

            if pickup.is_caught_by(player_x, config.PICKUP_CATCH_RADIUS):
                self._power_up.activate(pickup.activate(now))
            elif not pickup.is_off_screen:
                survivors.append(pickup)

        return survivors

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[KeyEvent]) -> None:
        """Process key events (left/right move the basket)."""
        for event in events:
            if event.key == KEY_LEFT:
                self.move_player(-1)
            elif event.key == KEY_RIGHT:
                self.move_player(1)

    def move_player(self, direction: int) -> float:
        """Move the basket one step left (-1) or right (+1) while playing.

        Returns:
            The basket position after the move
        """
        if self._phase == SessionPhase.PLAYING and direction:
            step = config.PLAYER_STEP if direction > 0 else -config.PLAYER_STEP
            self._player_x = min(config.PLAYER_MAX_X,
                                 max(config.PLAYER_MIN_X, self._player_x + step))
        return self._player_x

    # =========================================================================
    # Output
    # =========================================================================

    def snapshot(self) -> SessionSnapshot:
        """Immutable view of the session for renderers."""
        return SessionSnapshot(
            phase=self._phase,
            countdown_value=self._countdown,
            time_left=self._time_left,
            player_x=self._player_x,
            score=self._score.get_stats(),
            collectibles=tuple(h.to_view() for h in self._collectibles),
            pickups=tuple(p.to_view() for p in self._pickups),
            active_power_up=self._power_up.active,
            now=self._scheduler.now,
        )
