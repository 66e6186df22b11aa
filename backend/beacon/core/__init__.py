"""Core infrastructure: configuration, context, logging, protocols and wiring."""
