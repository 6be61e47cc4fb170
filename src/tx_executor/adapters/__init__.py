"""Adapters – concrete database handles for third-party drivers."""
