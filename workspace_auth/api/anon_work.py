from fastapi import APIRouter, Request, Response
import uuid
import logging
from workspace_auth.core.config import settings
from workspace_auth.db.memory import SessionAnonWorkStore
from workspace_auth.schemas.workspace import AnonWork

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/anon-work")
async def save_anon_work(anon_work: AnonWork, request: Request, response: Response):
    """
    Store the work an anonymous visitor has produced so it can be migrated
    into a project once they sign in or sign up.
    """
    session_id = request.cookies.get(settings.ANON_SESSION_COOKIE)
    if not session_id:
        # Generate Server-Side Session ID
        session_id = str(uuid.uuid4())
        response.set_cookie(
            key=settings.ANON_SESSION_COOKIE,
            value=session_id,
            httponly=True,
            samesite="lax",
            path="/",
        )

    SessionAnonWorkStore(session_id).save(anon_work)
    logger.info(f"Anonymous work saved for session {session_id}: {len(anon_work.messages)} messages")

    return {
        "status": "saved",
        "message_count": len(anon_work.messages),
        "file_count": len(anon_work.file_system_data),
    }
