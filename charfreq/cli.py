"""
Command-line entrypoint: histogram of standard input.
Reason: thin process boundary around the reader and renderer.

Usage:
    charfreq < corpus.txt
"""
import argparse
import logging
import sys

from charfreq.config import INPUT_ENCODING, LOG_FORMAT, LOG_LEVEL
from charfreq.histogram.reader import histogram_from_stream

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(
        description="Read text from standard input and print a letter-frequency histogram."
    )
    ap.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL.upper(), format=LOG_FORMAT, stream=sys.stderr)

    # Closed stdin (e.g. `charfreq <&-`) leaves sys.stdin as None
    if sys.stdin is None:
        logger.error("Failed to read standard input: stream is closed")
        return 1

    try:
        sys.stdin.reconfigure(encoding=INPUT_ENCODING, errors="strict")
        histogram = histogram_from_stream(sys.stdin)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read standard input: %s", exc)
        return 1

    print(histogram.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
