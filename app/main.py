"""Main FastAPI application for the Task Manager API and MCP tool server."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import APP_VERSION, HOST, LOG_FORMAT, LOG_LEVEL, PORT
from app.errors import TaskAppError
from app.middleware.cors import add_cors_middleware
from app.utils.logger import setup_logging

setup_logging(LOG_LEVEL, LOG_FORMAT)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Task Manager API",
    description="HTTP CRUD API for tasks plus an MCP-style tool-call endpoint over the same store",
    version=APP_VERSION,
)

# Add CORS middleware
add_cors_middleware(app)


@app.exception_handler(TaskAppError)
async def task_app_error_handler(request: Request, exc: TaskAppError):
    """Translate typed service errors into the response envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors: 400 with the envelope instead of 422."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": f"{location}: {message}" if location else message,
            "code": "VALIDATION_ERROR",
        },
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error", "code": "INTERNAL_ERROR"},
    )


@app.on_event("startup")
async def startup_event():
    """Build the shared task store and the MCP tool registry."""
    from app.mcp.server import get_mcp_server
    from app.services.task_store import get_task_store

    store = get_task_store()
    mcp_server = get_mcp_server()
    logger.info(f"Task store ready with {store.count()} tasks")
    logger.info(f"MCP Server initialized with tools: {mcp_server.list_tools()}")
    logger.info("Application startup complete.")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


@app.get("/")
async def root():
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Task Manager API",
        "title": "Task Manager API",
        "version": APP_VERSION,
        "docs": "/docs",
        "health": "/health",
        "tools": "/api/mcp/tools",
    }


# Import and include routers
from app.routers import files, mcp, status as status_routes, tasks
app.include_router(tasks.router, prefix="/api")  # Task endpoints: /api/tasks
app.include_router(files.router, prefix="/api")  # File endpoints: /api/files
app.include_router(status_routes.router, prefix="/api")  # Status endpoint: /api/status
app.include_router(mcp.router, prefix="/api")  # Tool-call endpoints: /api/mcp/tools, /api/mcp/call

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
