"""
Infrastructure adapters for the appeals bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system.
"""
