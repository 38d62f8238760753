"""Generate a markdown TODO template covering every day of a month."""

__version__ = "0.1.0"
