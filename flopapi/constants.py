CONFIG_PATHS = (
    "/config.json",
    "config.json",
    "./config.json",
)

IMAGE_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".bmp", ".webp"}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

REMOTE_IMAGE_MEDIA_TYPE = "image/jpeg"

DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_VIEW_UPDATE_TIMEOUT_SECONDS = 5.0

# names understood by both logging and uvicorn
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
