"""
Command-line flags shared by the example scripts.
"""
import argparse
import sys
from typing import List, Optional


def build_parser(description: str) -> argparse.ArgumentParser:
    """Parser with the privacy budget, seed and output flags every example accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--epsilon", type=float, default=1.0, help="Privacy parameter epsilon (default: 1.0)")
    parser.add_argument("--delta", type=float, default=1e-5, help="Privacy parameter delta (default: 1e-5)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the subset sampler; omit to draw from the OS entropy source",
    )
    parser.add_argument("--records", type=int, default=10_000, help="Number of synthetic records (default: 10000)")
    parser.add_argument(
        "--outdir",
        type=str,
        default="./_outputs",
        help="Directory for JSON reports (default: ./_outputs)",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Library log level (default: INFO)")
    return parser


def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser(description)
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(argv)
