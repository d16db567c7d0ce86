"""API module for the Tiger Five tracker.

API layer:
- Validates inputs, drives the owned AppState
- Returns payloads for UI
- Forbidden: chart rendering, direct SQL
"""
