"""Jewel Appraiser: material-cost valuation of jewelry against a quoted price."""

__version__ = "2.2.0"
