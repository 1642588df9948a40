"""
Shared error handling package.

Centralizes failure classification and error-to-HTTP mapping so that
every failure is consistently translated into one API error category.
"""
