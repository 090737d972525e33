"""Key-value store interface backing the expiring cache."""
from abc import ABC, abstractmethod
from typing import List, Optional


class IKeyValueStore(ABC):
    """Local string-keyed store scoped to one client."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        """List stored keys starting with ``prefix``."""
        pass

    def close(self) -> None:
        """Release any underlying resources."""
