"""Shared models, exceptions, logging and metrics for the mock API."""
