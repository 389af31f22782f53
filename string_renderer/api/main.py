"""String Renderer API.

Serves the format-option catalog and renders string attributes:
- Format-option definitions (upper, lower, cap, Camel, url-encode, xml-encode)
- Rendering of values with an option or a printf-style template
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from string_renderer import config
from string_renderer.api.routes import format_options
from string_renderer.format_options.registry import get_format_option_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: pre-load the catalog
    logger.info("Loading format-option definitions...")
    registry = get_format_option_registry()
    logger.info(f"Loaded {registry.count()} format options")

    logger.info(f"Default locale: {config.DEFAULT_LOCALE}")
    logger.info("String Renderer API ready")
    yield
    # Shutdown
    logger.info("Shutting down String Renderer API")


# Create FastAPI app
app = FastAPI(
    title=config.SERVICE_NAME,
    description="""
## String attribute rendering

Applies named format options to string values the way a template
engine's attribute renderer does.

### Key Endpoints
- `GET /v1/format-options` - List all format options
- `GET /v1/format-options/{key}` - Get a full format-option definition
- `GET /v1/format-options/category/{category}` - Options in a category
- `POST /v1/format-options/render` - Render a value
""",
    version=config.APP_VERSION,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(format_options.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": config.SERVICE_NAME,
        "version": config.APP_VERSION,
        "description": "String attribute rendering service",
        "docs": "/docs",
        "endpoints": {
            "format_options": "/v1/format-options",
            "render": "/v1/format-options/render",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    registry = get_format_option_registry()
    return {
        "status": "healthy",
        "format_options_loaded": registry.count(),
        "default_locale": config.DEFAULT_LOCALE,
    }
