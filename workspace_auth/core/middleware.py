from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import hashlib
from workspace_auth.core.audit import audit_repo, classify_action
from workspace_auth.core.config import settings
from workspace_auth.schemas.audit import AuditAction, AuditLogEntry, AuditStatus
import logging
from typing import Callable

logger = logging.getLogger(__name__)

CREDENTIAL_ACTIONS = (AuditAction.SIGN_IN, AuditAction.SIGN_UP)

class AuditMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        # 1. Capture Request Details
        endpoint = request.url.path
        method = request.method
        action_type = classify_action(endpoint)
        session_id = request.cookies.get(settings.ANON_SESSION_COOKIE) or "ANONYMOUS"

        logger.debug(f"Request to {endpoint}, session_id={session_id}")

        # 2. Capture & Hash Input
        # Credential forms carry passwords; no digest of them is recorded.
        input_hash = None
        if action_type not in CREDENTIAL_ACTIONS:
            request_body_bytes = await request.body()
            input_hash = hashlib.sha256(request_body_bytes).hexdigest()

        # 3. Process Request
        response = None
        status = AuditStatus.FAILURE
        status_code = None
        output_hash = None

        try:
            response = await call_next(request)
            status_code = response.status_code
            if 200 <= status_code < 400:
                status = AuditStatus.SUCCESS

            # 4. Capture & Hash Output
            response_body_bytes = b""
            async for chunk in response.body_iterator:
                response_body_bytes += chunk
            output_hash = hashlib.sha256(response_body_bytes).hexdigest()

            # Reconstruct response, keeping repeated headers such as Set-Cookie
            raw_headers = list(response.headers.raw)
            response = Response(
                content=response_body_bytes,
                status_code=response.status_code,
                media_type=response.media_type
            )
            response.raw_headers = raw_headers
        finally:
            # 5. Log Event
            try:
                entry = AuditLogEntry(
                    endpoint=endpoint,
                    method=method,
                    action_type=action_type,
                    session_id=session_id,
                    input_hash=input_hash,
                    output_hash=output_hash,
                    status_code=status_code,
                    status=status
                )
                audit_repo.save(entry)
            except Exception as log_error:
                logger.error(f"Audit Logging Failed: {log_error}")

        return response
