"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, step_at, race_timeline
from engine.recorder import (
    Recorder,
    RunMetrics,
    ComparisonResult,
    compare,
    record,
    validate_endpoints,
)

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "step_at",
    "race_timeline",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "record",
    "validate_endpoints",
]
