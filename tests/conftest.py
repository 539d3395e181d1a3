from pathlib import Path

import pytest
import yaml

from promo_decoder import DecoderConfig, PromotionClassifier

TESTS_DIR = Path(__file__).parent
GOLDEN_DATA_PATH = TESTS_DIR / "golden_promotions.yaml"

ENV_VARS = (
    "PROMO_DECODER_MIN_INPUT_LENGTH",
    "PROMO_DECODER_OCR_DELAY",
    "PROMO_DECODER_LOG_LEVEL",
)


def load_golden_cases() -> list:
    with open(GOLDEN_DATA_PATH, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data.get("cases", [])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def classifier():
    return PromotionClassifier()


@pytest.fixture
def fast_config():
    """Config with no simulated OCR latency."""
    return DecoderConfig(ocr_delay_seconds=0)
