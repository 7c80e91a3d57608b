from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Workspace Auth Handoff"
    LOG_LEVEL: str = "INFO"

    # Anonymous (pre-login) session
    ANON_SESSION_COOKIE: str = "anon_session_id"

    # Project naming used by reconciliation
    MIGRATED_PROJECT_PREFIX: str = "Design from"
    NEW_PROJECT_PREFIX: str = "New Design"

    class Config:
        case_sensitive = True

settings = Settings()
