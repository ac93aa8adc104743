# jackut/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Your configuration and System
from jackut.config import settings
from jackut.core.bootstrap import create_system
from jackut.core.errors import JackutError

from jackut.api.v1.routers import auth, users, messages, communities, relations, system as system_router

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(JackutError)
async def jackut_error_handler(request: Request, exc: JackutError):
    # Every System failure is a validation error: nothing was changed
    return JSONResponse(status_code=exc.status_code, content={"success": False, "error": exc.detail})

@app.on_event("startup")
async def on_startup():
    logger.setLevel(settings.log_level.upper())
    # Restore users/communities from the last snapshot (if any)
    app.state.system = create_system(settings)

@app.on_event("shutdown")
async def on_shutdown():
    system = getattr(app.state, "system", None)
    if system is not None and settings.persist_on_shutdown:
        system.shutdown()

# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(messages.router, prefix="/api/v1")
app.include_router(communities.router, prefix="/api/v1")
app.include_router(relations.router, prefix="/api/v1")
app.include_router(system_router.router, prefix="/api/v1")

@app.get("/healthz")
def healthz():
    return {"ok": True}
