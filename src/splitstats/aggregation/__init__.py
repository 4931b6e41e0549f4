"""Aggregation of workout history into statistics.

- stats: summary, weekly volume, distributions, personal records, progress
- month_view: day grouping and month grids for calendars
- report: one-call assembly of the statistics page
Everything here is pure: no I/O, no mutation of input records.
"""
