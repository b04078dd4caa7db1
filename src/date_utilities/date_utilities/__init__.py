"""Date Utilities package.

Formatting, parsing and minute arithmetic for local date/time values, organized
by feature modules (helper, patterns) on top of shared core/common layers.
"""
