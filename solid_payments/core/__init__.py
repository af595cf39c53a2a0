"""Shared infrastructure: logging, configuration, exceptions."""
