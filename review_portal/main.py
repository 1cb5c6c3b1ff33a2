import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from review_portal.api.admin.router import router as admin_router
from review_portal.api.feedback.router import router as feedback_router
from review_portal.api.instructor.router import router as instructor_router
from review_portal.api.pike13.router import router as pike13_router
from review_portal.api.templates.router import router as templates_router
from review_portal.core.config import settings
from review_portal.db.schema_check import ensure_tables
from review_portal.db.seed_data import seed_if_empty
from review_portal.db.session import AsyncSessionLocal, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.seed_on_startup:
        # Tables must exist before seeding
        await ensure_tables(engine)
        async with AsyncSessionLocal() as db:
            await seed_if_empty(db)
        logger.info("Default templates and sample roster checked")
    yield


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report only the first failing field, as a 400."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": first.get("msg", "Invalid input"), "field": ".".join(loc) or None},
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title="Monthly Review Portal", lifespan=lifespan)

    # CORS: allow the web client to call this API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(instructor_router)
    app.include_router(templates_router)
    app.include_router(feedback_router)
    app.include_router(pike13_router)
    app.include_router(admin_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
