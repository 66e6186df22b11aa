"""Constants shared across Beacon."""
