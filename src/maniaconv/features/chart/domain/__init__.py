"""Chart domain models."""
