from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from dotenv import load_dotenv
import logging

from app.core.config import settings
from app.core.database import init_db
from app.core.error_handlers import register_exception_handlers
from app.core.logging_config import configure_logging
from app.api.v1.api import api_router

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

api_description = """
## Smart Expense Tracker

- **Expenses**: log, edit, filter and delete expenses
- **Statistics**: totals by category and by month, computed on every request
- **Budgets**: one monthly limit per category with an alert threshold
- **Goals**: savings goals with progress tracking
- **Assistants**: keyword-based insights, rough predictions, voice-text parsing and a mocked receipt scan
"""


def get_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Smart Expense Tracker API",
        description=api_description,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # GZip compression for large JSON responses
    app.add_middleware(GZipMiddleware, minimum_size=500)

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.on_event("startup")
    def create_tables():
        logger.info("Ensuring database tables exist")
        init_db()

    @app.get("/")
    async def root():
        return {"message": "Smart Expense Tracker API is running"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    logger.info("API initialized")
    return app


app = get_app()
