"""File-backed EventStore implementations."""
