import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Google Gemini configuration (expression extraction)
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
SNAP_SOLVE_MODEL = os.getenv("SNAP_SOLVE_MODEL", "gemini-2.5-pro")
SNAP_SOLVE_TIMEOUT_SECONDS = int(os.getenv("SNAP_SOLVE_TIMEOUT_SECONDS", "60"))

# Uploads larger than this are rejected with 413
MAX_CONTENT_LENGTH = 10 * 1024 * 1024

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
