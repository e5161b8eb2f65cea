"""
Daily forecast calendar.

Modules
-------
engine   Positional week/month codes, step distances, weights, daily index.
series   Window iteration and ForecastSeries assembly (caller supplies "today").
summary  Month grouping, band counts, best/worst and favourable days.
"""
