"""POMASA workbench: browse and scaffold pattern-oriented multi-agent systems."""

__version__ = "0.1.0"
