"""Infrastructure layer - console output, logging and event publishing."""
