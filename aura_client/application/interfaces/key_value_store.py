"""Abstract key-value store interface — port for local persistence adapters.

Holds the session token and the handful of user preferences. Values are
restricted to JSON scalars (str, int, float, bool).
"""

from abc import ABC, abstractmethod

Scalar = str | int | float | bool


class KeyValueStore(ABC):
    """Port — defines what the application layer needs from local storage."""

    @abstractmethod
    def get(self, key: str) -> Scalar | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: Scalar) -> None:
        """Store a value, replacing any previous one."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key. Removing a missing key is a no-op."""
        ...

    def get_str(self, key: str, default: str = "") -> str:
        value = self.get(key)
        return value if isinstance(value, str) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        return value if isinstance(value, bool) else default

    def get_int(self, key: str) -> int | None:
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value
