# validation.py
"""
Run-boundary checks. Waveform.generate and the sampler accept anything;
the entry point calls validate_run first so a bad setting becomes a
DegenerateParameters instead of nan output or a crash.
"""

from __future__ import annotations

import math

from src.waveforms.errors import DegenerateParameters
from src.waveforms.oscillators import TWO_PI


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise DegenerateParameters(f"{name} must be a finite number, got {value}")


def validate_run(frequency: float,
                 duration: float,
                 sample_rate: int,
                 amplitude: float = 1.0,
                 phase: float = 0.0) -> None:
    """
    Reject settings that would give no samples or undefined output.

    Raises DegenerateParameters for a non-finite or non-positive frequency,
    a non-finite amplitude or phase, a non-integer or non-positive sample
    rate, a non-finite or negative duration, or a phase angle that
    overflows before the end of the run.
    """
    _require_finite("frequency", frequency)
    _require_finite("amplitude", amplitude)
    _require_finite("phase", phase)
    _require_finite("duration", duration)
    if frequency <= 0:
        raise DegenerateParameters(f"frequency must be positive, got {frequency}")
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, int):
        raise DegenerateParameters(f"sample rate must be an integer, got {sample_rate!r}")
    if sample_rate <= 0:
        raise DegenerateParameters(f"sample rate must be positive, got {sample_rate}")
    if duration < 0:
        raise DegenerateParameters(f"duration must be non-negative, got {duration}")
    # largest angle generate() will see
    if not math.isfinite(TWO_PI * frequency * duration + phase):
        raise DegenerateParameters(
            f"frequency {frequency} Hz over {duration}s overflows the phase angle"
        )
