from pydantic import BaseModel, ConfigDict
from typing import Optional

class CredentialResult(BaseModel):
    success: bool
    error: Optional[str] = None

class AuthState(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_loading: bool = False

def with_loading(state: AuthState, is_loading: bool) -> AuthState:
    """Return the next snapshot; snapshots are never mutated in place."""
    if state.is_loading == is_loading:
        return state
    return state.model_copy(update={"is_loading": is_loading})
