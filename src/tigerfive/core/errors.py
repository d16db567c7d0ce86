"""Error taxonomy.

- RoundValidationError: required entry fields missing or malformed; nothing
  is mutated.
- PersistenceWarning: local byte store failure; never fatal.
- RemoteError: mirror transport or service failure; recorded, never raised
  past the mirror.
"""


class RoundValidationError(ValueError):
    """Round entry is missing a required field or has a malformed one."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        invalid: list[str] | None = None,
    ):
        super().__init__(message)
        self.missing = missing or []
        self.invalid = invalid or []


class PersistenceWarning(UserWarning):
    """Local persistence failed; in-memory state is still authoritative."""


class RemoteError(Exception):
    """Remote mirror call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
