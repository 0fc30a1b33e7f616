"""Runtime configuration for the Task Manager service."""
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


APP_NAME = "task-manager-mcp"
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")

ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# Root directory exposed through the file tools; defaults to the working directory
WORKSPACE_DIR = os.environ.get("WORKSPACE_DIR", os.getcwd())

# Start with the two demo tasks ("1" completed, "2" open)
SEED_DEMO_TASKS = _as_bool(os.environ.get("SEED_DEMO_TASKS", "true"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "text").lower()  # text | json
