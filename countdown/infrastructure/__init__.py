"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (the event file, configuration
sources, the terminal) by implementing the interfaces defined in the domain layer.
"""
