from src.waveforms.errors import (
    WaveformError,
    InvalidWaveformKind,
    DegenerateParameters,
    PersistenceFailure,
)
from src.waveforms.oscillators import (
    Waveform,
    WaveformKind,
    WaveformParameters,
    make_waveform,
    parse_kind,
)
from src.waveforms.sampler import (
    Sample,
    SampleSeries,
    iter_samples,
    sample_count,
    sample_waveform,
)
from src.waveforms.validation import validate_run
from src.waveforms.persistence import read_csv, write_csv
