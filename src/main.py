# main.py
"""
Bare-bones entry point: ask for a waveform, sample it, save it as CSV.
No CLI flags, just edit the constants below.

Flow:
  prompt -> make_waveform -> validate_run -> sample_waveform -> write_csv
"""

from __future__ import annotations

import sys
from typing import Callable, Optional

from src.waveforms import (
    DegenerateParameters,
    InvalidWaveformKind,
    PersistenceFailure,
    make_waveform,
    sample_waveform,
    validate_run,
    write_csv,
)

# ===== EDIT HERE (hard-coded constants) =====
DURATION_S = 1.0               # seconds of signal
SAMPLE_RATE = 1000             # samples per second
OUTPUT_PATH = "waveform.csv"   # written relative to the working directory

PROMPT_KIND = "Select Waveform Type (1: Sine, 2: Square, 3: Triangle): "
PROMPT_FREQUENCY = "Enter Frequency (Hz): "
PROMPT_AMPLITUDE = "Enter Amplitude: "
PROMPT_PHASE = "Enter Phase Shift (radians, optional, default=0): "


def _read_float(ask: Callable[[str], str], prompt: str, default: Optional[float] = None) -> float:
    raw = ask(prompt).strip()
    if not raw and default is not None:
        return default
    return float(raw)


def main(ask: Callable[[str], str] = input, output_path: str = OUTPUT_PATH) -> int:
    try:
        kind = ask(PROMPT_KIND).strip()
        frequency = _read_float(ask, PROMPT_FREQUENCY)
        amplitude = _read_float(ask, PROMPT_AMPLITUDE)
        phase = _read_float(ask, PROMPT_PHASE, default=0.0)
    except ValueError as e:
        print(f"Invalid number: {e}", file=sys.stderr)
        return 1

    try:
        waveform = make_waveform(kind, frequency, amplitude, phase)
    except InvalidWaveformKind:
        print("Invalid waveform type selected.", file=sys.stderr)
        return 1

    try:
        validate_run(frequency, DURATION_S, SAMPLE_RATE, amplitude, phase)
    except DegenerateParameters as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 1

    series = sample_waveform(waveform, DURATION_S, SAMPLE_RATE)

    try:
        out_path = write_csv(output_path, series)
    except PersistenceFailure:
        print("Failed to open file for writing.", file=sys.stderr)
        return 1

    print(f"Waveform saved to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
