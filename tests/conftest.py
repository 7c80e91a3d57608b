import itertools
from datetime import datetime
from types import SimpleNamespace
from typing import List, Optional

import pytest

from workspace_auth.core.audit import audit_repo
from workspace_auth.core.auth_controller import AuthController
from workspace_auth.core.collaborators import AnonWorkStore, CredentialExchange, Navigator, ProjectStore
from workspace_auth.core.reconciliation import ReconciliationEngine
from workspace_auth.db.memory import APP_STATE
from workspace_auth.schemas.auth import CredentialResult
from workspace_auth.schemas.workspace import AnonWork, Project, ProjectCreate

FIXED_NOW = datetime(2026, 10, 17, 9, 30, 0)


class RecordingCredentialExchange(CredentialExchange):
    def __init__(self, events):
        self.events = events
        self.result = CredentialResult(success=False, error="Invalid credentials")
        self.error: Optional[Exception] = None
        self.gate = None  # asyncio.Event that holds the exchange open

    async def _settle(self):
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result

    async def sign_in(self, email, password):
        self.events.append(("sign_in", email, password))
        return await self._settle()

    async def sign_up(self, email, password):
        self.events.append(("sign_up", email, password))
        return await self._settle()


class RecordingAnonWorkStore(AnonWorkStore):
    def __init__(self, events):
        self.events = events
        self.record: Optional[AnonWork] = None
        self.clear_error: Optional[Exception] = None

    def read(self):
        self.events.append(("read",))
        return self.record

    def clear(self):
        self.events.append(("clear",))
        if self.clear_error is not None:
            raise self.clear_error
        self.record = None


class RecordingProjectStore(ProjectStore):
    def __init__(self, events):
        self.events = events
        self.projects: List[Project] = []
        self.next_id = "new-proj"
        self.create_error: Optional[Exception] = None

    async def list(self):
        self.events.append(("list",))
        return list(self.projects)

    async def create(self, project: ProjectCreate):
        self.events.append(("create", project))
        if self.create_error is not None:
            raise self.create_error
        return Project(id=self.next_id, name=project.name, messages=project.messages, data=project.data)


class RecordingNavigator(Navigator):
    def __init__(self, events):
        self.events = events

    def go_to(self, path):
        self.events.append(("go_to", path))


@pytest.fixture
def harness():
    events = []
    credentials = RecordingCredentialExchange(events)
    anon_store = RecordingAnonWorkStore(events)
    project_store = RecordingProjectStore(events)
    navigator = RecordingNavigator(events)
    numbers = itertools.count(1000)
    engine = ReconciliationEngine(
        anon_store,
        project_store,
        navigator,
        clock=lambda: FIXED_NOW,
        design_numbers=lambda: next(numbers),
    )
    return SimpleNamespace(
        events=events,
        credentials=credentials,
        anon_store=anon_store,
        project_store=project_store,
        navigator=navigator,
        engine=engine,
        controller=AuthController(credentials, engine),
    )


@pytest.fixture
def clean_state():
    APP_STATE["anon_work"].clear()
    APP_STATE["projects"].clear()
    audit_repo.clear()
    yield APP_STATE
