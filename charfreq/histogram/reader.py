"""
Stream driver for the histogram.
Reason: owns chunked reading so the accumulator never touches I/O.
"""
import logging
from typing import Iterator, Optional, TextIO

from charfreq.config import CHUNK_SIZE
from .accumulator import CharacterHistogram
from .stats import bump, lookup

logger = logging.getLogger(__name__)


def read_chunks(stream: TextIO, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    for chunk in iter(lambda: stream.read(chunk_size), ""):
        yield chunk


def histogram_from_stream(stream: TextIO, stats: Optional[dict] = None, chunk_size: int = CHUNK_SIZE) -> CharacterHistogram:
    """Ingest the whole stream, in order, into a fresh histogram.

    Read errors (OSError, UnicodeDecodeError) propagate to the caller.
    """
    if stats is None:
        stats = {}
    histogram = CharacterHistogram()
    for chunk in read_chunks(stream, chunk_size):
        logger.debug("Read chunk of %d characters", len(chunk))
        histogram.ingest(chunk)
        bump(stats, "chunks_read")
        bump(stats, "characters_read", len(chunk))
    logger.debug(
        "Stream exhausted: %d chunks, %d characters read, %d counted, %d distinct",
        lookup(stats, "chunks_read"),
        lookup(stats, "characters_read"),
        histogram.total,
        len(histogram.counts),
    )
    return histogram
