"""
Data access for agents, list items and import runs.

Plain async functions taking the AsyncSession first.  They flush so ids
and defaults are populated, and leave commit to the request session.
"""
