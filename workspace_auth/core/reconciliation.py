import itertools
import logging
import random
from datetime import datetime
from typing import Callable, Optional, Sequence
from workspace_auth.core.collaborators import AnonWorkStore, Navigator, ProjectStore
from workspace_auth.core.config import settings
from workspace_auth.schemas.reconciliation import (
    CreateNewPlan,
    MigratePlan,
    ReconciliationAction,
    ReconciliationPlan,
    RedirectExistingPlan,
)
from workspace_auth.schemas.workspace import AnonWork, Project, ProjectCreate, has_anon_work

logger = logging.getLogger(__name__)

# AUTHORITATIVE RECONCILIATION ENGINE – DO NOT DUPLICATE
# Single source of truth for where a user lands after authenticating.

_design_numbers = itertools.count(random.randrange(1, 100000))

def next_design_number() -> int:
    """Process-wide sequence, so two calls never produce the same "New Design #n"."""
    return next(_design_numbers)

def project_path(project_id: str) -> str:
    return f"/{project_id}"

def plan_reconciliation(
    anon_work: Optional[AnonWork],
    projects: Sequence[Project],
    now: datetime,
    design_numbers: Callable[[], int] = next_design_number,
) -> ReconciliationPlan:
    """
    Pick exactly one post-login action, in priority order:
    migrate anonymous work, open the most recent project, or start a new one.
    `projects` is only consulted when there is no anonymous work and must
    already be ordered most recent first. A design number is drawn only
    when a new project is started.
    """
    if has_anon_work(anon_work):
        return MigratePlan(project=ProjectCreate(
            name=f"{settings.MIGRATED_PROJECT_PREFIX} {now.strftime('%Y-%m-%d %H:%M:%S')}",
            messages=list(anon_work.messages),
            data=dict(anon_work.file_system_data),
        ))

    if projects:
        return RedirectExistingPlan(project_id=projects[0].id)

    return CreateNewPlan(project=ProjectCreate(
        name=f"{settings.NEW_PROJECT_PREFIX} #{design_numbers()}",
        messages=[],
        data={},
    ))

class ReconciliationEngine:
    def __init__(
        self,
        anon_work_store: AnonWorkStore,
        project_store: ProjectStore,
        navigator: Navigator,
        clock: Callable[[], datetime] = datetime.now,
        design_numbers: Callable[[], int] = next_design_number,
    ):
        self.anon_work_store = anon_work_store
        self.project_store = project_store
        self.navigator = navigator
        self._clock = clock
        self._design_numbers = design_numbers

    async def reconcile(self) -> None:
        anon_work = self.anon_work_store.read()

        # Listing is skipped entirely when there is work to migrate.
        projects = [] if has_anon_work(anon_work) else await self.project_store.list()

        plan = plan_reconciliation(anon_work, projects, self._clock(), self._design_numbers)
        logger.info(f"Reconciliation plan selected: {plan.action.value}")
        await self.execute(plan)

    async def execute(self, plan: ReconciliationPlan) -> None:
        # No rollback: if create succeeds and clear/navigate fails, the project stays.
        if plan.action == ReconciliationAction.MIGRATE:
            project = await self.project_store.create(plan.project)
            self.anon_work_store.clear()
            logger.info(f"Anonymous work migrated into project {project.id}")
            self.navigator.go_to(project_path(project.id))
        elif plan.action == ReconciliationAction.REDIRECT_EXISTING:
            self.navigator.go_to(project_path(plan.project_id))
        else:
            project = await self.project_store.create(plan.project)
            logger.info(f"Created project {project.id} ({plan.project.name})")
            self.navigator.go_to(project_path(project.id))
