"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "5000"))

# When TESTING=true, use test DB URL so tests never touch production.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./locations.db",
    )

# Comma-separated list; "*" allows any origin (the globe client is served from anywhere).
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
