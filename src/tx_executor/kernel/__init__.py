"""Kernel – error hierarchy and database ports."""
