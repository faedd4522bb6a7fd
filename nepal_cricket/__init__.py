"""Statistics and chart helpers behind the Nepal cricket analytics dashboard."""

__version__ = "0.1.0"
