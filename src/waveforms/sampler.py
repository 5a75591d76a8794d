# sampler.py
"""
Turn a Waveform into a discrete series of (time, value) samples over
[0, duration] at a fixed sample rate.

The default loop is index-locked: t = n / sample_rate, so the count is
floor(duration * sample_rate) + 1 (the last time never passes duration) and
there is no drift. accumulate=True keeps the legacy `t += step` loop, whose
count can be off by one.

Callers must reject sample_rate <= 0 and negative durations first
(see src.waveforms.validation); nothing here checks.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, NamedTuple

from src.waveforms.oscillators import Waveform

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    time: float
    value: float


SampleSeries = List[Sample]


def sample_count(duration: float, sample_rate: int) -> int:
    """Number of samples an index-locked run produces (boundary included)."""
    if duration < 0:
        return 0
    n = int(math.floor(duration * sample_rate))
    # the product can round either way across a step boundary
    while n > 0 and n / sample_rate > duration:
        n -= 1
    if (n + 1) / sample_rate <= duration:
        n += 1
    return n + 1


def _iter_indexed(waveform: Waveform, duration: float, sample_rate: int) -> Iterator[Sample]:
    for n in range(sample_count(duration, sample_rate)):
        t = n / sample_rate
        yield Sample(t, waveform.generate(t))


def _iter_accumulated(waveform: Waveform, duration: float, sample_rate: int) -> Iterator[Sample]:
    step = 1.0 / sample_rate
    t = 0.0
    while t <= duration:
        yield Sample(t, waveform.generate(t))
        t += step


def iter_samples(waveform: Waveform,
                 duration: float,
                 sample_rate: int,
                 accumulate: bool = False) -> Iterator[Sample]:
    """Lazily yield samples in time order."""
    if accumulate:
        return _iter_accumulated(waveform, duration, sample_rate)
    return _iter_indexed(waveform, duration, sample_rate)


def sample_waveform(waveform: Waveform,
                    duration: float,
                    sample_rate: int,
                    accumulate: bool = False) -> SampleSeries:
    """
    Sample `waveform` from t=0 to t=duration (inclusive when it lands on a step).

    Args:
        waveform: any Waveform; its parameters are read on every sample.
        duration: seconds, >= 0.
        sample_rate: samples per second, > 0.
        accumulate: use the legacy floating-point stepping loop.

    Returns:
        A fresh list of Sample, first at t=0, spaced 1/sample_rate apart.
    """
    series = list(iter_samples(waveform, duration, sample_rate, accumulate=accumulate))
    logger.debug("Sampled %r: %d samples over %.6gs at %d Hz",
                 waveform, len(series), duration, sample_rate)
    return series

