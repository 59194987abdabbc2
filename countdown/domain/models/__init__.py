"""Domain models: events and the values derived from them."""
