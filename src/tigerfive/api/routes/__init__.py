"""Routers for the Tiger Five API."""
