from typing import Dict, Any, List, Optional
from workspace_auth.core.collaborators import AnonWorkStore, Navigator, ProjectStore
from workspace_auth.schemas.workspace import AnonWork, Project, ProjectCreate

# AUTHORITATIVE GLOBAL STORE – DO NOT DUPLICATE
# Structure: { "anon_work": { anon_session_id: AnonWork }, "projects": { owner: [Project, ...] } }
# In-memory only; project lists are kept most recent first.
APP_STATE: Dict[str, Dict[str, Any]] = {"anon_work": {}, "projects": {}}

class SessionAnonWorkStore(AnonWorkStore):
    """Anonymous work for one browser session, identified by its anon session cookie."""

    def __init__(self, session_id: Optional[str], state: Dict[str, Dict[str, Any]] = APP_STATE):
        self.session_id = session_id
        self._records: Dict[str, AnonWork] = state["anon_work"]

    def read(self) -> Optional[AnonWork]:
        if not self.session_id:
            return None
        return self._records.get(self.session_id)

    def save(self, anon_work: AnonWork):
        self._records[self.session_id] = anon_work

    def clear(self) -> None:
        if self.session_id:
            self._records.pop(self.session_id, None)

class UserProjectStore(ProjectStore):
    def __init__(self, owner: str, state: Dict[str, Dict[str, Any]] = APP_STATE):
        self.owner = owner
        self._projects: Dict[str, List[Project]] = state["projects"]

    async def list(self) -> List[Project]:
        return list(self._projects.get(self.owner, []))

    async def create(self, project: ProjectCreate) -> Project:
        created = Project(name=project.name, messages=project.messages, data=project.data)
        self._projects.setdefault(self.owner, []).insert(0, created)
        return created

class RedirectNavigator(Navigator):
    """Remembers the last destination so the HTTP layer can answer with a redirect."""

    def __init__(self):
        self.destination: Optional[str] = None

    def go_to(self, path: str) -> None:
        self.destination = path
