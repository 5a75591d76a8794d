# oscillators.py
"""
Periodic waveform generators: sine, square, triangle.

A Waveform is a kind tag plus one set of parameters (frequency, amplitude,
phase). generate(t) is a pure function of t and the current parameters; the
setters change parameters in place for subsequent calls only.

Nothing here validates frequency. f <= 0 gives degenerate (constant or
mirrored) output; only Waveform.period refuses to divide by zero. An angle
that is not finite (inf frequency or phase, or 2*pi*f*t overflowing) gives
nan for every shape.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Dict, Union

from src.waveforms.errors import DegenerateParameters, InvalidWaveformKind

TWO_PI = 2.0 * math.pi


class WaveformKind(IntEnum):
    """Menu numbers match the interactive selector (1: Sine, 2: Square, 3: Triangle)."""
    SINE = 1
    SQUARE = 2
    TRIANGLE = 3


KindSelector = Union[WaveformKind, int, str]


class WaveformParameters:
    def __init__(self, frequency: float, amplitude: float, phase: float = 0.0):
        self.frequency = float(frequency)
        self.amplitude = float(amplitude)
        self.phase = float(phase)

    def __repr__(self):
        return (f"WaveformParameters(frequency={self.frequency}, "
                f"amplitude={self.amplitude}, phase={self.phase})")

    def __eq__(self, other):
        if not isinstance(other, WaveformParameters):
            return NotImplemented
        return (
            self.frequency == other.frequency
            and self.amplitude == other.amplitude
            and self.phase == other.phase
        )


# ===== SHAPES =====
# Each shape maps (parameters, time) -> value.
def _angle(p: WaveformParameters, time: float) -> float:
    return TWO_PI * p.frequency * time + p.phase


def _sin(angle: float) -> float:
    # math.sin raises on +-inf
    return math.sin(angle) if math.isfinite(angle) else math.nan


def sine_value(p: WaveformParameters, time: float) -> float:
    return p.amplitude * _sin(_angle(p, time))


def square_value(p: WaveformParameters, time: float) -> float:
    s = _sin(_angle(p, time))
    if math.isnan(s):
        return math.nan
    # zero belongs to the positive half
    return p.amplitude if s >= 0 else -p.amplitude


def triangle_value(p: WaveformParameters, time: float) -> float:
    """Closed-form triangle: asin(sin(x)) is linear between -pi/2 and pi/2."""
    return (2.0 * p.amplitude / math.pi) * math.asin(_sin(_angle(p, time)))


ShapeFn = Callable[[WaveformParameters, float], float]

_SHAPE_LOOKUP: Dict[WaveformKind, ShapeFn] = {
    WaveformKind.SINE: sine_value,
    WaveformKind.SQUARE: square_value,
    WaveformKind.TRIANGLE: triangle_value,
}


# ===== WAVEFORM =====
class Waveform:
    def __init__(self, kind: WaveformKind, parameters: WaveformParameters):
        self.kind = kind
        self.parameters = parameters

    def __repr__(self):
        return f"Waveform({self.kind.name}, {self.parameters!r})"

    def generate(self, time: float) -> float:
        return _SHAPE_LOOKUP[self.kind](self.parameters, time)

    def set_frequency(self, frequency: float) -> None:
        self.parameters.frequency = float(frequency)

    def set_amplitude(self, amplitude: float) -> None:
        self.parameters.amplitude = float(amplitude)

    def set_phase(self, phase: float) -> None:
        self.parameters.phase = float(phase)

    @property
    def period(self) -> float:
        """Seconds per cycle."""
        if self.parameters.frequency <= 0:
            raise DegenerateParameters(
                f"period is undefined for frequency {self.parameters.frequency} Hz"
            )
        return 1.0 / self.parameters.frequency


def parse_kind(kind: KindSelector) -> WaveformKind:
    """
    Resolve a selector to a WaveformKind.

    Accepts the enum itself, its menu number (1/2/3) or its name
    ("sine", "Square", ...). Anything else raises InvalidWaveformKind.
    """
    if isinstance(kind, WaveformKind):
        return kind
    if isinstance(kind, bool):
        raise InvalidWaveformKind(kind)
    if isinstance(kind, int):
        try:
            return WaveformKind(kind)
        except ValueError:
            raise InvalidWaveformKind(kind) from None
    if isinstance(kind, str):
        name = kind.strip().upper()
        if name.isdigit():
            return parse_kind(int(name))
        try:
            return WaveformKind[name]
        except KeyError:
            raise InvalidWaveformKind(kind) from None
    raise InvalidWaveformKind(kind)


def make_waveform(kind: KindSelector,
                  frequency: float,
                  amplitude: float,
                  phase: float = 0.0) -> Waveform:
    """Build a Waveform; raises InvalidWaveformKind before anything is constructed."""
    resolved = parse_kind(kind)
    return Waveform(resolved, WaveformParameters(frequency, amplitude, phase))
