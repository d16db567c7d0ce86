"""Shared identity helpers and error types."""
