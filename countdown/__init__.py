"""countdown: count the days to the events you are looking forward to."""

__version__ = "0.3.0"
