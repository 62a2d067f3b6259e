"""Centralized configuration. Input, logging, and report settings in one place."""
import os

# Input stream
CHUNK_SIZE = int(os.getenv("CHARFREQ_CHUNK_SIZE", "65536"))
INPUT_ENCODING = os.getenv("CHARFREQ_ENCODING", "utf-8")

# Logging (stderr only; stdout carries the report)
LOG_LEVEL = os.getenv("CHARFREQ_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Report
MIN_PERCENTAGE = 1.0
BAR_CHAR = "#"
