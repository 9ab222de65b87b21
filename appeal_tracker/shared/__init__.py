"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Security middleware
- Request logging
- Rate limiting
- Logging configuration
"""
