from abc import ABC, abstractmethod


class SequenceRepository(ABC):
    """Repository interface for named, monotonically increasing counters"""

    @abstractmethod
    async def next_value(self, name: str) -> int:
        """Atomically increment the named counter and return the new value"""
        pass
