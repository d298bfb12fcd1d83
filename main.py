import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import AssessmentSettings, get_settings
from src.core.logging_config import setup_logging
from src.routers import assessment as assessment_router
from services.counselor_assessment.engine import AssessmentEngine

logger = logging.getLogger(__name__)


def build_engine(settings: AssessmentSettings) -> AssessmentEngine:
    if settings.catalog_path:
        logger.info(f"Using question catalog from {settings.catalog_path}")
        return AssessmentEngine.from_catalog_file(settings.catalog_path)
    return AssessmentEngine()


def create_app(settings: Optional[AssessmentSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Catalog problems surface here, before the first request is served
        app.state.assessment_engine = build_engine(settings)
        logger.info("Career counselor assessment service ready")
        yield
        logger.info("Career counselor assessment service shutting down")

    app = FastAPI(title="Career Counselor Assessment Engine", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(assessment_router.router, prefix=settings.api_prefix, tags=["assessment"])

    @app.get("/health", tags=["Health Check"])
    async def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
