"""Rates Clearance - application store.

Persistence and status lifecycle for municipal rates-clearance certificate
applications and the administrator accounts that review them.
"""

__version__ = "1.0.0"
