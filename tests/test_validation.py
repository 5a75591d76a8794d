import math

import pytest

from src.waveforms.errors import DegenerateParameters
from src.waveforms.validation import validate_run


def test_validate_run_accepts_defaults():
    validate_run(440.0, 1.0, 1000)
    validate_run(1.0, 0.0, 1)
    validate_run(20_000.0, 1.0, 1000, amplitude=-3.0, phase=-7.5)


@pytest.mark.parametrize("frequency, duration, rate", [
    (0.0, 1.0, 1000),
    (-5.0, 1.0, 1000),
    (440.0, 1.0, 0),
    (440.0, 1.0, -10),
    (440.0, -1.0, 1000),
    (440.0, 1.0, 1000.0),
    (440.0, 1.0, True),
    (math.inf, 1.0, 1000),
    (math.nan, 1.0, 1000),
    (1e308, 1.0, 1000),        # 2*pi*f*t overflows to inf
    (440.0, math.inf, 1000),
    (440.0, math.nan, 1000),
])
def test_validate_run_rejects_degenerate_settings(frequency, duration, rate):
    with pytest.raises(DegenerateParameters):
        validate_run(frequency, duration, rate)


@pytest.mark.parametrize("amplitude, phase", [
    (math.inf, 0.0),
    (-math.inf, 0.0),
    (math.nan, 0.0),
    (1.0, math.inf),
    (1.0, math.nan),
])
def test_validate_run_rejects_non_finite_amplitude_and_phase(amplitude, phase):
    with pytest.raises(DegenerateParameters):
        validate_run(440.0, 1.0, 1000, amplitude=amplitude, phase=phase)


def test_degenerate_parameters_is_a_value_error():
    with pytest.raises(ValueError, match="frequency must be a finite number"):
        validate_run(math.inf, 1.0, 1000)
