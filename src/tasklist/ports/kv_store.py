"""Local key-value store interface."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a small local preferences store."""

    def get_string(self, key: str) -> str | None:
        """Read a string value. Returns None if absent or not a string."""
        ...

    def set_string(self, key: str, value: str) -> None:
        """Write/overwrite a string value."""
        ...

    def get_bool(self, key: str) -> bool | None:
        """Read a bool value. Returns None if absent or not a bool."""
        ...

    def set_bool(self, key: str, value: bool) -> None:
        """Write/overwrite a bool value."""
        ...
