import os

DATA_DIR = os.getenv("DATA_DIR", "data")

PORT = int(os.getenv("PORT", "8000"))

# Comma-separated, e.g. https://your-site.netlify.app,http://localhost:5173
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

SEASON_MAX_WEEKS = int(os.getenv("SEASON_MAX_WEEKS", "18"))

CACHE_MAX_AGE = int(os.getenv("CACHE_MAX_AGE", "3600"))

PRELOAD_ON_STARTUP = os.getenv("PRELOAD_ON_STARTUP", "1").strip().lower() not in ("0", "false", "no", "off")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
