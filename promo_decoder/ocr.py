"""
OCR Text Source

Boundary between an image of promo copy and the classifier.

Any real OCR/vision backend plugs in by subclassing PromotionTextSource.
CannedOCRSource is the offline stand-in: it waits a moment and returns one
of a few known phrases.

Workflow:
1. User picks an image (or the camera)
2. capture_promotion_text() runs once
3. The returned text goes straight into classify()
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .config import DecoderConfig, default_config

logger = logging.getLogger(__name__)


class OCRCaptureError(Exception):
    """Raised when no text could be captured from the image."""


class PromotionTextSource(ABC):
    @abstractmethod
    def capture_promotion_text(self) -> str:
        pass


class CannedOCRSource(PromotionTextSource):
    """
    Simulated OCR.

    Sleeps for config.ocr_delay_seconds, then returns a phrase from
    config.canned_phrases. Pass a seeded rng for reproducible picks.
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        image_path: Optional[Union[str, Path]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config if config is not None else default_config
        self.image_path = Path(image_path) if image_path is not None else None
        self.rng = rng or random.Random()

    def capture_promotion_text(self) -> str:
        if self.image_path is not None and not self.image_path.is_file():
            raise OCRCaptureError(f"Image not found: {self.image_path}")

        logger.info(f"Recognizing promo text from {self.image_path or 'camera'}")
        if self.config.ocr_delay_seconds:
            time.sleep(self.config.ocr_delay_seconds)

        text = self.rng.choice(self.config.canned_phrases)
        logger.debug(f"Captured: {text}")
        return text
