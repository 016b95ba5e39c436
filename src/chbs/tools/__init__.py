"""Standalone reporting tools for CHBS score tables."""
