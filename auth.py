"""Staff login by email domain suffix; not a password or token check."""
import asyncio
import logging
from enum import Enum
from typing import Optional

from config import STAFF_EMAIL_DOMAIN
from errors import DomainMismatchError, PermissionDeniedError
from models import StaffSession
from persistence import PersistenceAdapter

logger = logging.getLogger(__name__)


class Actor(str, Enum):
    ANONYMOUS = "anonymous"
    STAFF = "staff"


def is_staff_email(email: str, domain: str = STAFF_EMAIL_DOMAIN) -> bool:
    return email.lower().endswith(domain.lower())


class AuthorizationGate:
    def __init__(self, adapter: PersistenceAdapter, current_session: Optional[StaffSession] = None):
        self.adapter = adapter
        self.current_session = current_session
        self._lock = asyncio.Lock()

    @classmethod
    async def restore(cls, adapter: PersistenceAdapter) -> "AuthorizationGate":
        return cls(adapter, await adapter.load_session())

    async def login(self, email: str, display_name: str) -> StaffSession:
        if not is_staff_email(email):
            logger.warning("Staff login rejected for a non-%s address", STAFF_EMAIL_DOMAIN)
            raise DomainMismatchError(email, STAFF_EMAIL_DOMAIN)
        staff = StaffSession(email=email, display_name=display_name)
        async with self._lock:
            await self.adapter.save_session(staff)
            self.current_session = staff
        logger.info("Staff session opened for %s", display_name)
        return staff

    async def logout(self) -> None:
        async with self._lock:
            await self.adapter.save_session(None)
            self.current_session = None
        logger.info("Staff session closed")

    def classify(self) -> Actor:
        return Actor.STAFF if self.current_session is not None else Actor.ANONYMOUS

    def require_staff(self, action: str) -> StaffSession:
        if self.current_session is None:
            logger.warning("Anonymous %s rejected", action)
            raise PermissionDeniedError(f"Only staff may {action} reservations.")
        return self.current_session
