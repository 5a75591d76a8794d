# errors.py
"""
Error types for waveform generation.

Each one also derives from the builtin that callers would otherwise catch
(ValueError for bad input, OSError for file problems).
"""


class WaveformError(Exception):
    """Base class for every error raised by this package."""


class InvalidWaveformKind(WaveformError, ValueError):
    """Kind selector is not one of sine / square / triangle."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown waveform kind: {kind!r} (valid: 1/sine, 2/square, 3/triangle)")


class DegenerateParameters(WaveformError, ValueError):
    """Frequency, duration or sample rate outside the range that makes sense."""


class PersistenceFailure(WaveformError, OSError):
    """Sample series could not be written."""
