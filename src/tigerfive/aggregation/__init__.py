"""Aggregation module for round analytics.

- Pure computation over the round list (averages, goal tally, trends,
  frequency, chart series)
- Forbidden: persistence, remote mirror calls
"""
