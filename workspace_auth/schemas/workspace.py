from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import datetime, timezone
import uuid

class ChatMessage(BaseModel):
    # Chat payloads carry tool invocations and ids we don't model; keep them intact.
    model_config = ConfigDict(extra="allow")

    role: str
    content: str = ""

class AnonWork(BaseModel):
    """Chat messages and generated files accumulated before the user authenticated."""
    messages: List[ChatMessage] = Field(default_factory=list)
    file_system_data: Dict[str, str] = Field(default_factory=dict, alias="fileSystemData")

    model_config = ConfigDict(populate_by_name=True)

def has_anon_work(anon_work: Optional[AnonWork]) -> bool:
    """A record only counts as anonymous work when it has at least one message."""
    return anon_work is not None and len(anon_work.messages) > 0

class ProjectCreate(BaseModel):
    name: str
    messages: List[ChatMessage] = Field(default_factory=list)
    data: Dict[str, str] = Field(default_factory=dict)

class Project(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    messages: List[ChatMessage] = Field(default_factory=list)
    data: Dict[str, str] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
