"""Attendance Calendar package.

Feature modules (punches, leaves, holidays, calendars, ...) reconcile raw clock
punches against holidays, approved leave and the weekly-off rule into one status
per employee per day. Services depend on repository protocols; MySQL
implementations and a thin Flask controller sit at the edges.
"""
