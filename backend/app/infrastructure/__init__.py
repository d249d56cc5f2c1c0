"""Infrastructure Layer - logging setup and the clock dependency."""
