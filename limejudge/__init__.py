"""Compiler definitions, judge configuration and setup-form logic for a contest judge."""

__version__ = "0.1.0"