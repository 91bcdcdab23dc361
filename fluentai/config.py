"""
Configuration for the FluentAI lesson service.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# OpenAI API
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")
OPENAI_BASE_URL = os.environ.get("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_BETA_HEADER = "assistants=v2"  # sent as the OpenAI-Beta header on every call

# Assistant that writes the lessons
ASSISTANT_ID = os.environ.get("ASSISTANT_ID", "asst_mwBvVrwED3NhTkh8NqZDFXBH")

# Run polling
POLL_INTERVAL = float(os.environ.get("POLL_INTERVAL", "1"))  # seconds between run status checks
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "60"))  # seconds per upstream call

# API security. Empty means the JSON API is open.
API_TOKEN = os.environ.get("API_TOKEN") or None

# Web pages
SESSION_SECRET_KEY = os.environ.get("SESSION_SECRET_KEY", "change-me")
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]

# Server settings
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
