import logging
from fastapi import FastAPI
from workspace_auth.core.config import settings
from workspace_auth.core.middleware import AuditMiddleware
from workspace_auth.api import anon_work, auth, health

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(AuditMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(anon_work.router)
app.include_router(auth.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
