"""Runnable examples of design patterns and SOLID principles, with a demo command."""

__version__ = "0.1.0"