from abc import ABC, abstractmethod
from typing import List, Optional
from workspace_auth.schemas.auth import CredentialResult
from workspace_auth.schemas.workspace import AnonWork, Project, ProjectCreate

# Boundaries consumed by the auth controller and the reconciliation engine.
# Concrete in-memory implementations live in workspace_auth.db.memory and
# workspace_auth.core.credentials.

class CredentialExchange(ABC):
    """Validates credentials and establishes a session. May raise instead of returning."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> CredentialResult:
        pass

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> CredentialResult:
        pass

class AnonWorkStore(ABC):
    @abstractmethod
    def read(self) -> Optional[AnonWork]:
        """Idempotent, side-effect free."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Takes effect immediately; a following read() returns None."""
        pass

class ProjectStore(ABC):
    @abstractmethod
    async def list(self) -> List[Project]:
        """The authenticated user's projects, most recent first."""
        pass

    @abstractmethod
    async def create(self, project: ProjectCreate) -> Project:
        pass

class Navigator(ABC):
    @abstractmethod
    def go_to(self, path: str) -> None:
        pass
