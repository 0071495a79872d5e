"""Fake test data generators and an HTTP service that serves them as JSON."""

__version__ = "0.1.0"