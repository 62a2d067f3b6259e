"""Letter-frequency histogram over standard input."""
