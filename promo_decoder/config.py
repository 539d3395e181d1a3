"""
Decoder Configuration

Central configuration for the shells around the classifier (CLI, OCR stub).
The classifier itself takes no configuration.
"""

import logging
import os
from dataclasses import dataclass
from typing import Tuple


CANNED_PHRASES: Tuple[str, ...] = (
    "1件50 加一元多一件",
    "買2送一",
    "第2件半價",
    "1件100元，加10元多一件",
    "滿千送百",
)


@dataclass
class DecoderConfig:
    """Shell settings"""
    min_input_length: int = 3          # Shells only decode text longer than 2 chars
    ocr_delay_seconds: float = 1.2     # Simulated OCR latency
    canned_phrases: Tuple[str, ...] = CANNED_PHRASES
    log_level: str = "INFO"

    def __post_init__(self):
        if self.min_input_length < 0:
            raise ValueError(f"min_input_length must be >= 0, got {self.min_input_length}")
        if self.ocr_delay_seconds < 0:
            raise ValueError(f"ocr_delay_seconds must be >= 0, got {self.ocr_delay_seconds}")
        if not self.canned_phrases:
            raise ValueError("canned_phrases must not be empty")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "DecoderConfig":
        """
        Build config from PROMO_DECODER_* environment variables.

        Unset variables keep their defaults.
        """
        overrides = {}

        raw_length = os.environ.get('PROMO_DECODER_MIN_INPUT_LENGTH')
        if raw_length is not None:
            try:
                overrides['min_input_length'] = int(raw_length)
            except ValueError:
                raise ValueError(f"PROMO_DECODER_MIN_INPUT_LENGTH must be an integer, got {raw_length!r}")

        raw_delay = os.environ.get('PROMO_DECODER_OCR_DELAY')
        if raw_delay is not None:
            try:
                overrides['ocr_delay_seconds'] = float(raw_delay)
            except ValueError:
                raise ValueError(f"PROMO_DECODER_OCR_DELAY must be a number, got {raw_delay!r}")

        raw_level = os.environ.get('PROMO_DECODER_LOG_LEVEL')
        if raw_level:
            overrides['log_level'] = raw_level.upper()

        return cls(**overrides)

    def accepts(self, text: str) -> bool:
        """Whether a shell should decode this input at all."""
        return bool(text) and len(text) >= self.min_input_length


# Default configuration instance
default_config = DecoderConfig()
