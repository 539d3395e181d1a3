#!/usr/bin/env python3
"""
Promo Decoder - Command Line Shell

Usage:
    python3 main.py decode "買一送一"
    python3 main.py decode "買一送一" "7折" "滿千送百" --rank
    python3 main.py scan --image flyer.jpg
    python3 main.py compare 100 4 60 2
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)

from promo_decoder import (
    CannedOCRSource,
    DecoderConfig,
    OCRCaptureError,
    PromotionClassifier,
    compare_unit_prices,
)


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_decode(texts: List[str], rank: bool, config: DecoderConfig) -> int:
    """Decode each phrase; too-short input is reported as null."""
    classifier = PromotionClassifier()

    if rank:
        accepted = [text for text in texts if config.accepts(text)]
        ranked = classifier.rank(accepted)
        _print_json([{'text': text, **result.to_dict()} for text, result in ranked])
        return 0

    output = []
    for text in texts:
        if not config.accepts(text):
            logger.debug(f"Skipping short input: {text!r}")
            output.append(None)
            continue
        output.append(classifier.classify(text).to_dict())

    _print_json(output)
    return 0


def cmd_scan(image: Optional[str], seed: Optional[int], config: DecoderConfig) -> int:
    """Capture text with the OCR stand-in and decode it."""
    rng = random.Random(seed) if seed is not None else None
    source = CannedOCRSource(config, image_path=image, rng=rng)

    try:
        text = source.capture_promotion_text()
    except OCRCaptureError as e:
        logger.error(f"OCR failed: {e}")
        return 1

    result = PromotionClassifier().classify(text)
    _print_json({'text': text, **result.to_dict()})
    return 0


def cmd_compare(price_a: str, qty_a: str, price_b: str, qty_b: str) -> int:
    comparison = compare_unit_prices((price_a, qty_a), (price_b, qty_b))
    _print_json({
        'unit_a': comparison.unit_a,
        'unit_b': comparison.unit_b,
        'winner': comparison.winner,
        'ratio': round(comparison.ratio, 4),
    })
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Decode Chinese promo copy into an effective discount')
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    decode_parser = subparsers.add_parser('decode', help='Decode promo phrases')
    decode_parser.add_argument('texts', nargs='+', help='Promo phrases')
    decode_parser.add_argument(
        '--rank',
        action='store_true',
        help='Only show decodable offers, cheapest first'
    )

    scan_parser = subparsers.add_parser('scan', help='Decode text from an image (simulated OCR)')
    scan_parser.add_argument('--image', type=str, help='Image file path')
    scan_parser.add_argument('--seed', type=int, help='Seed for the simulated OCR pick')

    compare_parser = subparsers.add_parser('compare', help='Compare two offers by unit price')
    compare_parser.add_argument('price_a')
    compare_parser.add_argument('qty_a')
    compare_parser.add_argument('price_b')
    compare_parser.add_argument('qty_b')

    args = parser.parse_args(argv)

    try:
        config = DecoderConfig.from_env()
    except ValueError as e:
        logger.error(str(e))
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)

    if args.command == 'decode':
        return cmd_decode(args.texts, args.rank, config)
    elif args.command == 'scan':
        return cmd_scan(args.image, args.seed, config)
    else:
        return cmd_compare(args.price_a, args.qty_a, args.price_b, args.qty_b)


if __name__ == '__main__':
    sys.exit(main())
