"""Command line interface for POMASA."""
