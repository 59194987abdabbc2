"""Domain Layer: events, their invariants, errors and the ports that
infrastructure adapters implement.
"""
