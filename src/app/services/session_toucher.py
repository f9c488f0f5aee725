from abc import ABC, abstractmethod
from uuid import UUID


class ISessionToucher(ABC):
    """
    Records ``last_seen_at`` for an authenticated session.

    ``dispatch`` returns immediately. The update runs on its own store session
    after (or while) the request completes, and a failure is logged and dropped:
    it never reaches the request that triggered it.
    """

    @abstractmethod
    def dispatch(self, session_id: UUID) -> None:
        pass

    @abstractmethod
    async def drain(self) -> None:
        """Wait for every dispatched update to finish"""
        pass
