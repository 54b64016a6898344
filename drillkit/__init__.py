"""Compile, run and test course exercises and track which are still pending."""

__version__ = "0.1.0"