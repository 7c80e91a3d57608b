from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone
import uuid
from enum import Enum

class AuditStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"

class AuditAction(str, Enum):
    SIGN_IN = "SIGN_IN"
    SIGN_UP = "SIGN_UP"
    SAVE_ANON_WORK = "SAVE_ANON_WORK"
    HEALTH_CHECK = "HEALTH_CHECK"
    UNKNOWN = "UNKNOWN"

class AuditLogEntry(BaseModel):
    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    endpoint: str
    method: str
    action_type: AuditAction
    session_id: str
    input_hash: Optional[str] = None
    output_hash: Optional[str] = None
    status_code: Optional[int] = None
    status: AuditStatus
