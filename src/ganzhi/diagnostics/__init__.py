"""Diagnostics package.

Console tools for self-tests and audits; never used on the query path.
Plots need the optional extras: pip install "ganzhi[diagnostics]".
"""

__all__ = ["validate_reference", "new_years_table", "pretty_month", "leap_months", "term_drift", "round_trip"]
