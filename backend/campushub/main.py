from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from pydantic.alias_generators import to_camel
from slowapi.errors import RateLimitExceeded

from campushub.core.config import settings
from campushub.core.exceptions import (
    AIServiceError,
    AuthenticationError,
    AuthorizationError,
    CampusHubError,
    DuplicateRequestError,
    ResourceNotFoundError,
    ValidationError,
    error_response,
)
from campushub.core.logging_config import logger
from campushub.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from campushub.core.rate_limiter import limiter, rate_limit_exceeded_handler
from campushub.core.session import SessionManager
from campushub.api.v1.router import api_router
from campushub.services.enquiry_service import EnquiryService
from campushub.services.registry import CampusRegistry
from campushub.services.study_questions import StudyQuestionGenerator


def validate_critical_config():
    """Validate critical configuration at startup - fail fast if missing"""
    errors = []

    if not settings.SECRET_KEY or settings.SECRET_KEY == "CHANGE_ME":
        errors.append("SECRET_KEY is not set or using default value")

    if not settings.JWT_SECRET_KEY or settings.JWT_SECRET_KEY == "CHANGE_ME":
        errors.append("JWT_SECRET_KEY is not set or using default value")

    if not settings.ANTHROPIC_API_KEY:
        errors.append("ANTHROPIC_API_KEY is not set - study question generation will NOT work!")

    if errors:
        for err in errors:
            logger.critical(f"[Startup] CRITICAL: {err}")
        raise RuntimeError(f"Missing critical configuration: {', '.join(errors)}")

    logger.info("[Startup] Critical configuration validated")


def init_app_state(
    app: FastAPI,
    registry: Optional[CampusRegistry] = None,
    question_generator: Optional[StudyQuestionGenerator] = None,
    enquiry_service: Optional[EnquiryService] = None,
) -> None:
    """Attach the record registry, session manager and flows to the app"""
    if registry is None:
        registry = CampusRegistry.with_demo_data() if settings.SEED_DEMO_DATA else CampusRegistry()
    app.state.registry = registry
    app.state.sessions = SessionManager()
    app.state.question_generator = question_generator or StudyQuestionGenerator()
    app.state.enquiry_service = enquiry_service or EnquiryService()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"API Version: {settings.API_VERSION}")
    logger.info("=" * 60)

    validate_critical_config()
    init_app_state(app)

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    app.state.sessions.clear()


app = FastAPI(
    title=settings.APP_NAME,
    description="School management backend: records, fees, notices and AI study questions",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    redirect_slashes=False
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add middleware (order matters - last added runs first)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)


def status_code_for(exc: CampusHubError) -> int:
    if isinstance(exc, ValidationError):
        return 422
    if isinstance(exc, ResourceNotFoundError):
        return 404
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, AuthorizationError):
        return 403
    if isinstance(exc, DuplicateRequestError):
        return 409
    if isinstance(exc, AIServiceError):
        return 502
    return 400


def _clean_message(message: str) -> str:
    if message.startswith("Value error, "):
        return message[len("Value error, "):]
    return message


# Exception handlers
@app.exception_handler(CampusHubError)
async def campushub_exception_handler(request: Request, exc: CampusHubError):
    status_code = status_code_for(exc)
    body = error_response(exc)
    if isinstance(exc, ValidationError):
        # field names go out in their wire (camelCase) form
        body["error"]["details"]["errors"] = {
            to_camel(field): messages for field, messages in exc.errors.items()
        }
    if status_code >= 500:
        logger.log_error_with_context(exc, context=request.url.path)
    else:
        logger.info(f"[API] {request.method} {request.url.path} -> {status_code} {exc.code}")
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path"):
            field = loc[1]
        else:
            field = loc[0] if loc else "body"
        errors.setdefault(field, []).append(_clean_message(error.get("msg", "Invalid value")))

    body = error_response(ValidationError(errors))
    return JSONResponse(status_code=422, content=body)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": str(exc) if settings.DEBUG else "An error occurred",
                "details": {},
            },
        }
    )


# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": "1.0.0",
        "docs": "/docs",
        "health": f"/api/{settings.API_VERSION}/health"
    }


app.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")


def run():
    import uvicorn
    uvicorn.run(
        "campushub.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    run()
