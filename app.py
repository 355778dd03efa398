"""
app.py
──────
BlogInfo — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Resolve the default language for first-time visitors
  3. Create Dash app with DARKLY bootstrap theme
  4. Register all callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.languages import SOURCE_LANGUAGE, is_supported
from config.settings import settings
from src.layout.main import create_layout

# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("bloginfo")

# ── 2. Language default ───────────────────────────────────────────────────────
# Each visitor's choice lives in their browser; this only seeds first visits
default_language = settings.DEFAULT_LANG if is_supported(settings.DEFAULT_LANG) else SOURCE_LANGUAGE
logger.info("Default language for new visitors: %s", default_language)

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="BlogInfo",
)

server = app.server  # gunicorn entry point
app.layout = create_layout(default_language)

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import article, navigation

navigation.register(app)
article.register(app)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
