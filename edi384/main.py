import argparse
import logging
import sys
import time
from pathlib import Path

import pandas as pd

from edi384.decoders.segment_reader import SEGMENT_SEPARATOR
from edi384.models.segment_dictionary import ELEMENT_SEPARATOR
from edi384.types.exceptions import Edi384Error
from edi384.utils.filters import EligibilityAnalysisHelper
from edi384.utils.handlers import convert_file_to_csv

logger = logging.getLogger("edi384")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a 384 eligibility file into CSV, one row per member record.")
    parser.add_argument("input", type=Path, help="Eligibility file to parse")
    parser.add_argument("output", type=Path, nargs="?", help="CSV file to write (default: INPUT with .csv suffix)")
    parser.add_argument("--separator", default=SEGMENT_SEPARATOR, help="Segment separator (default: %(default)s)")
    parser.add_argument("--element-separator", default=ELEMENT_SEPARATOR,
                        help="Separator after the segment key (default: %(default)s)")
    parser.add_argument("--stats", action="store_true", help="Print dataset statistics after the export")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: %(default)s)")
    return parser


def print_statistics(output_csv: Path) -> None:
    df = pd.read_csv(output_csv, dtype=str, keep_default_na=False)

    print(f"\n{'=' * 60}")
    print("Dataset Statistics")
    print(f"{'=' * 60}")

    stats = EligibilityAnalysisHelper.get_statistics(df)
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"  {key:30s}: {value:.2f}")
        else:
            print(f"  {key:30s}: {value}")

    fill_rates = EligibilityAnalysisHelper.column_fill_rates(df)
    print("\n  Column fill rates:")
    for column, rate in fill_rates.items():
        print(f"    {column:10s} {rate:6.1%}")


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    # ============================================================
    # LOGGING CONFIGURATION
    # ============================================================
    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("edi384").setLevel(log_level)

    # ============================================================
    # PATHS
    # ============================================================
    input_file: Path = args.input
    output_csv: Path = args.output or input_file.with_suffix(".csv")
    if output_csv.resolve() == input_file.resolve():
        logger.error("Output file would overwrite the input file: %s", input_file)
        return 1
    output_csv.parent.mkdir(parents=True, exist_ok=True)

    print(f"\n{'=' * 60}")
    print("384 Eligibility File Parser")
    print(f"{'=' * 60}")
    print(f"Input file:  {input_file}")
    print(f"Output file: {output_csv}")
    print(f"{'=' * 60}\n")

    # ============================================================
    # PARSE & EXPORT (streaming, one record in memory at a time)
    # ============================================================
    start_time = time.perf_counter()
    try:
        record_count = convert_file_to_csv(
            str(input_file),
            str(output_csv),
            separator=args.separator,
            element_separator=args.element_separator,
        )
    except (Edi384Error, OSError) as e:
        logger.error("Failed to convert %s: %s", input_file, e)
        return 1
    elapsed_time = time.perf_counter() - start_time

    print(f"Converted {record_count:,} records in {elapsed_time:.4f}s")
    if elapsed_time > 0:
        print(f"Throughput: {record_count / elapsed_time:.2f} records/sec")

    if args.stats:
        print_statistics(output_csv)

    return 0


if __name__ == "__main__":
    sys.exit(main())
