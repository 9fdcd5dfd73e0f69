"""Audio layer: square → frequency → PCM samples → WAV bytes."""

from chesswav.audio.constants import NOTE_MS, SAMPLE_RATE, SCALE, SILENCE_MS
from chesswav.audio.freq import FREQUENCY_TABLE, Tuning, frequency
from chesswav.audio.synth import sample_count, silence, synthesize
from chesswav.audio.tables import SINE_TABLE, Waveform, wave_table
from chesswav.audio.wav import MAX_SAMPLES, encode, wav_header

__all__ = [
    # Constants
    "NOTE_MS",
    "SAMPLE_RATE",
    "SCALE",
    "SILENCE_MS",
    # Pitch
    "FREQUENCY_TABLE",
    "Tuning",
    "frequency",
    # Synthesis
    "SINE_TABLE",
    "Waveform",
    "sample_count",
    "silence",
    "synthesize",
    "wave_table",
    # Container
    "MAX_SAMPLES",
    "encode",
    "wav_header",
]
