"""SMS transport providers."""
