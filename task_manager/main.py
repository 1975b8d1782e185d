import logging
import time
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.database import SessionLocal, check_db_connection, init_db
from .core.exceptions import TaskManagerError
from .core.seed import seed_defaults
from .routers import auth, labels, task_statuses, tasks, users

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Task Manager",
    description="Tasks, statuses, labels and users with filtered listing",
    version=settings.service_version
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

app.include_router(auth.router, prefix=settings.api_prefix, tags=["auth"])
app.include_router(users.router, prefix=settings.api_prefix + "/users", tags=["users"])
app.include_router(
    task_statuses.router,
    prefix=settings.api_prefix + "/task_statuses",
    tags=["task statuses"]
)
app.include_router(labels.router, prefix=settings.api_prefix + "/labels", tags=["labels"])
app.include_router(tasks.router, prefix=settings.api_prefix + "/tasks", tags=["tasks"])


@app.exception_handler(TaskManagerError)
async def task_manager_error_handler(request: Request, exc: TaskManagerError):
    logger.warning(f"{request.method} {request.url.path} failed with {exc.code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path} rejected: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "VALIDATION", "detail": errors}
    )


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup"""
    logger.info("Starting Task Manager...")
    if not init_db():
        logger.error("Database initialization failed")
        return

    if settings.seed_data:
        db = SessionLocal()
        try:
            seed_defaults(db)
        finally:
            db.close()

    logger.info("Task Manager startup completed")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "message": "Task Manager is operational"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    db_healthy = check_db_connection()
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "healthy" if db_healthy else "unhealthy",
        "database": "connected" if db_healthy else "disconnected",
        "timestamp": time.time()
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("task_manager.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
