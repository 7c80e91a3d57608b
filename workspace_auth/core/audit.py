from abc import ABC, abstractmethod
from typing import List
from workspace_auth.schemas.audit import AuditAction, AuditLogEntry
import logging

logger = logging.getLogger(__name__)

class AuditRepository(ABC):
    @abstractmethod
    def save(self, entry: AuditLogEntry):
        pass

    @abstractmethod
    def get_all(self) -> List[AuditLogEntry]:
        pass

    @abstractmethod
    def clear(self):
        pass

class InMemoryAuditRepository(AuditRepository):
    def __init__(self):
        self._storage: List[AuditLogEntry] = []

    def save(self, entry: AuditLogEntry):
        # Append-only
        self._storage.append(entry)
        logger.info(f"Audit Logged: {entry.model_dump_json()}")

    def get_all(self) -> List[AuditLogEntry]:
        return list(self._storage)

    def clear(self):
        self._storage.clear()

def classify_action(path: str) -> AuditAction:
    if path.startswith("/auth/sign-in"):
        return AuditAction.SIGN_IN
    if path.startswith("/auth/sign-up"):
        return AuditAction.SIGN_UP
    if path.startswith("/anon-work"):
        return AuditAction.SAVE_ANON_WORK
    if path.startswith("/health"):
        return AuditAction.HEALTH_CHECK
    return AuditAction.UNKNOWN

# Global Accessor
audit_repo = InMemoryAuditRepository()
