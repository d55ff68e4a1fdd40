"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper replays a precomputed step sequence.  It never talks back
to the recorder: playback is pure indexing into an immutable list, so
stopping is just not calling tick() any more.

Controls: play / pause / step forward / step backward / jump / reset /
speed.

State machine:
    IDLE     →  load()          →  PAUSED
    PAUSED   →  play()          →  PLAYING   (from step 0 again if at the end)
    PLAYING  →  pause()         →  PAUSED
    PLAYING  →  (reached end)   →  FINISHED
    any      →  step / jump / reset  →  PAUSED
    any      →  unload()        →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread (the
  request handler, or a UI timer).
"""

import time
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.2,
    "fast":   0.08,
    "turbo":  0.02,
}

MIN_SPEED = 0.01

T = TypeVar("T")


def step_at(steps: Sequence[T], index: int) -> Optional[T]:
    """
    Clamp `index` into `steps`.  Race mode drives two sequences from one
    index; the shorter one keeps showing its last step.
    """
    if not steps:
        return None
    return steps[max(0, min(index, len(steps) - 1))]


def race_timeline(left: Sequence[T], right: Sequence[T]) -> List[Tuple[Optional[T], Optional[T]]]:
    """Pair two runs frame by frame; the timeline is as long as the longer run."""
    return [(step_at(left, i), step_at(right, i)) for i in range(max(len(left), len(right)))]


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The sequence being replayed.
        current_idx : Index into `steps` that is currently displayed.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(index) fired every time the index changes.
    """

    def __init__(
        self,
        steps: Optional[Sequence] = None,
        speed: str = "medium",
        on_step: Optional[Callable[[int], None]] = None,
    ):
        self.steps:       Sequence = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.on_step:     Optional[Callable[[int], None]] = on_step

        # for auto-play timing
        self._last_tick:  float = 0.0

        if steps is not None:
            self.load(steps)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence, index: int = 0) -> None:
        """Attach a sequence and show `index` (clamped), paused."""
        self.steps = steps
        self.state = StepperState.PAUSED
        self.current_idx = -1
        self._goto(index)

    def unload(self) -> None:
        """Back to IDLE — caller must load() again."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    def reset(self) -> None:
        """Back to step 0, paused."""
        if self.state == StepperState.IDLE:
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step and pause.  Returns False if already at the end."""
        self._pause_if_running()
        if self.current_idx >= self.total_steps - 1:
            return False
        self._goto(self.current_idx + 1)
        return True

    def step_backward(self) -> bool:
        """Rewind one step and pause.  Returns False if already at the start."""
        self._pause_if_running()
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def jump_to(self, idx: int) -> int:
        """Jump to `idx`, clamped to the sequence.  Returns the index shown."""
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(idx)
        return self.current_idx

    def jump_to_end(self) -> int:
        return self.jump_to(self.total_steps - 1)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.IDLE or not self.steps:
            return
        if self.at_end:
            self._goto(0)
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def resume(self) -> None:
        """Re-enter PLAYING at the current index, e.g. for a restored session."""
        if self.state == StepperState.IDLE or not self.steps:
            return
        self.state = StepperState.FINISHED if self.at_end else StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If playing and at least `speed` seconds have
        passed since the last advance, move forward one step.  Returns
        True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        if now is None:
            now = time.monotonic()
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.advance()

    def advance(self) -> bool:
        """Move one step as the play timer would.  Reaching the last step finishes playback."""
        if self.at_end:
            self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.at_end:
            self.state = StepperState.FINISHED
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.speed = SPEED_PRESETS[preset]

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Any]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def at_end(self) -> bool:
        return self.current_idx >= self.total_steps - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _pause_if_running(self) -> None:
        if self.state in (StepperState.PLAYING, StepperState.FINISHED):
            self.state = StepperState.PAUSED

    def _goto(self, idx: int) -> None:
        if not self.steps:
            self.current_idx = -1
            return
        idx = max(0, min(idx, len(self.steps) - 1))
        if idx != self.current_idx:
            self.current_idx = idx
            if self.on_step:
                self.on_step(idx)
