"""Fair Repair regional labor rate engine.

Resolves a US ZIP code to the hourly shop labor rate used when quoting
vehicle repairs.

Architecture:
- zip_state_service: ZIP -> state via ordered numeric ranges
- geo_service: coarse ZIP coordinates + haversine distance
- labor_rate_service: state rates, metro premiums, multiplier
- quote_adjustment_service: applies the multiplier to catalog prices
"""

__version__ = "1.0.0"
