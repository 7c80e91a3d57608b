from fastapi import APIRouter, Cookie, Form
from fastapi.responses import JSONResponse, RedirectResponse
from typing import Optional
import logging
from workspace_auth.core.auth_controller import AuthController
from workspace_auth.core.config import settings
from workspace_auth.core.credentials import credential_exchange, normalize_email
from workspace_auth.core.reconciliation import ReconciliationEngine
from workspace_auth.db.memory import RedirectNavigator, SessionAnonWorkStore, UserProjectStore
from workspace_auth.schemas.auth import CredentialResult

router = APIRouter(prefix="/auth")
logger = logging.getLogger(__name__)

def build_controller(anon_session_id: Optional[str], email: str, navigator: RedirectNavigator) -> AuthController:
    """Wire a controller whose collaborators are scoped to this browser session and user."""
    engine = ReconciliationEngine(
        anon_work_store=SessionAnonWorkStore(anon_session_id),
        project_store=UserProjectStore(normalize_email(email)),
        navigator=navigator,
    )
    return AuthController(credential_exchange, engine)

def _respond(result: CredentialResult, navigator: RedirectNavigator):
    if result.success and navigator.destination:
        return RedirectResponse(url=navigator.destination, status_code=303)
    # Structured failures are rendered inline by the client.
    return JSONResponse(content=result.model_dump())

@router.post("/sign-in")
async def sign_in(
    email: str = Form(...),
    password: str = Form(...),
    anon_session_id: Optional[str] = Cookie(None, alias=settings.ANON_SESSION_COOKIE),
):
    navigator = RedirectNavigator()
    result = await build_controller(anon_session_id, email, navigator).sign_in(email, password)
    logger.info(f"Sign-in for {normalize_email(email)}: success={result.success}")
    return _respond(result, navigator)

@router.post("/sign-up")
async def sign_up(
    email: str = Form(...),
    password: str = Form(...),
    anon_session_id: Optional[str] = Cookie(None, alias=settings.ANON_SESSION_COOKIE),
):
    navigator = RedirectNavigator()
    result = await build_controller(anon_session_id, email, navigator).sign_up(email, password)
    logger.info(f"Sign-up for {normalize_email(email)}: success={result.success}")
    return _respond(result, navigator)
