"""Owned, persisted application state."""
