"""Models package.

Export all models for easy importing
"""

from .application import Admin, Application, ApplicationStatus

__all__ = [
    "Admin",
    "Application",
    "ApplicationStatus",
]
