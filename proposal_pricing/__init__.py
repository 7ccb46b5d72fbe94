"""Proposal pricing engine — team composition, hours and price estimates for commercial proposals."""

__version__ = "0.1.0"
