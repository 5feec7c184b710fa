"""Service Layer."""

from .application_store import ApplicationStore

__all__ = ['ApplicationStore']
