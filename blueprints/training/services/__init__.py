"""Training services package."""
