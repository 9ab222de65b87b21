"""
Appeals bounded context: domain layer.

This module contains all domain logic for the appeals context:
- The Appeal entity and its status enumeration
- The lifecycle state machine (which transitions are legal)
- The storage port the application layer depends on
"""
