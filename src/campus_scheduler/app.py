"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_scheduler.api.routes import (
    auth,
    classroom,
    course,
    dashboard,
    feedback,
    profile,
    timetable,
)
from campus_scheduler.config import (
    API_HOST,
    API_PORT,
    APP_VERSION,
    CORS_ALLOWED_ORIGINS,
    SEED_DEMO_DATA,
)
from campus_scheduler.core.database import SessionLocal, init_db
from campus_scheduler.core.logging_config import setup_logging
from campus_scheduler.utils import seed
from campus_scheduler.utils.auth_events import auth_notifier

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Campus Scheduler API",
    description="Backend API for classroom, course and timetable scheduling.",
    version=APP_VERSION,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(classroom.router)
app.include_router(course.router)
app.include_router(timetable.router)
app.include_router(feedback.router)
app.include_router(dashboard.router)


def _log_auth_event(event: str, identity_id) -> None:
    logger.info("Auth event %s for identity %s", event, identity_id or "<anonymous>")


@app.on_event("startup")
def startup_tasks() -> None:
    """Create the schema, seed demo data and start auth-event logging."""
    init_db()
    if SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed.run(db)
        finally:
            db.close()
    app.state.auth_subscription = auth_notifier.subscribe(_log_auth_event)


@app.on_event("shutdown")
def shutdown_tasks() -> None:
    subscription = getattr(app.state, "auth_subscription", None)
    if subscription is not None:
        subscription.unsubscribe()


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root, returns API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "Campus Scheduler API",
        "version": APP_VERSION,
        "description": "Backend API for classroom, course and timetable scheduling.",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/api/health",
    }


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{API_HOST}:{API_PORT}"
    print(f"Campus Scheduler API: {server_url}")
    print(f"API docs: {server_url}/docs")
    uvicorn.run("campus_scheduler.app:app", host=API_HOST, port=API_PORT, reload=True)
