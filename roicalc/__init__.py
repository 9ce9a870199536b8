"""
roicalc - A SaaS ROI calculator.

This package estimates the business case for a software purchase: annual
savings, payback period, first-year ROI and a three-year projection, with
JSON, CSV, PDF and chart exports.
"""

__version__ = "0.1.0"
