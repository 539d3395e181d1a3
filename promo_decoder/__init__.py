"""
Promo Decoder

Translates Chinese promotional copy ("買一送一", "滿千送百", "第2件半價")
into one comparable number: the effective discount on the 10-point 折 scale.

Key Components:
- normalize: Chinese / Arabic numeral tokens → numbers
- extract_prices: Literal prices in promo copy
- MATCHERS: Ordered promotion pattern matchers
- PromotionClassifier: Main orchestrator
- PromotionResult: Unified result schema
- CannedOCRSource: Offline OCR stand-in
- compare_unit_prices: Price-per-unit comparison
"""

from .numerals import normalize, format_number, NUM_PATTERN
from .schema import PromotionResult, PromotionType
from .prices import extract_prices
from .matchers import MATCHERS
from .classifier import PromotionClassifier, classify, rank_promotions, unknown_result
from .config import DecoderConfig, default_config
from .ocr import PromotionTextSource, CannedOCRSource, OCRCaptureError
from .unit_price import unit_price, compare_unit_prices, UnitPriceComparison

__all__ = [
    # Numerals
    'normalize',
    'format_number',
    'NUM_PATTERN',

    # Schema
    'PromotionResult',
    'PromotionType',

    # Extraction and matching
    'extract_prices',
    'MATCHERS',

    # Classifier
    'PromotionClassifier',
    'classify',
    'rank_promotions',
    'unknown_result',

    # Config
    'DecoderConfig',
    'default_config',

    # OCR boundary
    'PromotionTextSource',
    'CannedOCRSource',
    'OCRCaptureError',

    # Unit price
    'unit_price',
    'compare_unit_prices',
    'UnitPriceComparison',
]
