"""HTTP layer for the chip engine."""
