"""Core transformations."""
