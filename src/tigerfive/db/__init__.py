"""Storage layer: local byte store keyed by logical name."""
