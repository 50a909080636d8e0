"""clover-check: threshold gate for Clover XML coverage reports."""

__version__ = "0.1.0"
