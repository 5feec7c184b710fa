"""Custom Exceptions for the Application Store.

Not-found lookups are not errors: store operations return None for them.
Constraint violations (duplicate reference_number or username) and malformed
JSON in document columns are not translated either; the raw SQLAlchemy or
JSON error reaches the caller unmodified.
"""


class StoreError(Exception):
    """Base exception for all application store errors."""
    pass


class DatabaseConnectionError(StoreError):
    """Connecting, creating the schema or seeding the default admin failed.

    Fatal: the store must not serve requests with a partially
    initialized schema.
    """
    pass


class StoreNotInitializedError(StoreError):
    """A data operation was called before the store was initialized."""
    pass


class RecordDecodeError(StoreError):
    """A persisted row could not be decoded into a typed record."""

    def __init__(self, table: str, row_id: str | None, detail: str):
        self.table = table
        self.row_id = row_id
        self.detail = detail
        super().__init__(f"Malformed row in '{table}' (id={row_id}): {detail}")
