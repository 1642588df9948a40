"""
Hosts bounded context — domain layer.

This module contains all domain logic for the hosts context:
- Performance records and uptime
- Network capacity aggregation
- Host stats, assignments and registrations
- Error taxonomy
"""
