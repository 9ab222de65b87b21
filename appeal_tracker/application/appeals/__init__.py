"""
Application layer for the appeals bounded context.

Use cases coordinate the lifecycle rules and the repository port to
fulfill business operations. No framework or infrastructure imports allowed.
"""
