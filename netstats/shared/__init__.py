"""
Shared module package.

Cross-cutting concerns:
- Failure classification and error responses
- Security headers and rate limiting
- Logging configuration
"""
