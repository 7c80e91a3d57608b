from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Union
from workspace_auth.schemas.workspace import ProjectCreate

class ReconciliationAction(str, Enum):
    MIGRATE = "MIGRATE"
    REDIRECT_EXISTING = "REDIRECT_EXISTING"
    CREATE_NEW = "CREATE_NEW"

class MigratePlan(BaseModel):
    """Persist anonymous work as a new project, then discard it."""
    model_config = ConfigDict(frozen=True)

    action: Literal[ReconciliationAction.MIGRATE] = ReconciliationAction.MIGRATE
    project: ProjectCreate

class RedirectExistingPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal[ReconciliationAction.REDIRECT_EXISTING] = ReconciliationAction.REDIRECT_EXISTING
    project_id: str

class CreateNewPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal[ReconciliationAction.CREATE_NEW] = ReconciliationAction.CREATE_NEW
    project: ProjectCreate

ReconciliationPlan = Annotated[
    Union[MigratePlan, RedirectExistingPlan, CreateNewPlan],
    Field(discriminator="action"),
]
