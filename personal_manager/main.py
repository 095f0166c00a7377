import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from .config import settings
from .crud.crud_category import seed_default_categories
from .db.core import Base, engine, session_local
from .logging_config import get_logger, log_request, setup_logging
from .routers.accounts import router as accounts_router
from .routers.auth import router as auth_router
from .routers.budgets import router as budgets_router
from .routers.categories import router as categories_router
from .routers.liabilities import router as liabilities_router
from .routers.loans import router as loans_router
from .routers.recurring_transactions import router as recurring_transactions_router
from .routers.savings_goals import router as savings_goals_router
from .routers.transactions import router as transactions_router
from .routers.user_data import router as user_data_router

setup_logging()
logger = get_logger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Fail fast instead of on the first login
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is not configured")

    Base.metadata.create_all(bind=engine)
    db = session_local()
    try:
        seed_default_categories(db)
    finally:
        db.close()

    logger.info("Personal Manager API started")
    yield
    logger.info("Personal Manager API stopped")


app = FastAPI(title="Personal Manager API", version=API_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - started) * 1000
    log_request(logger, request.method, request.url.path, response.status_code, duration_ms)
    return response


# ===== ERROR ENVELOPES =====

def _is_auth_path(request: Request) -> bool:
    return request.url.path.startswith("/auth")


def _error_response(request: Request, status_code: int, message: str, details=None, headers=None) -> JSONResponse:
    # Auth clients expect {"error": ...}; everything else gets the standard envelope
    if _is_auth_path(request):
        content = {"error": message}
    else:
        content = {"success": False, "message": message}
        if details:
            content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error_response(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    first = details[0] if details else None
    if first and first["field"]:
        message = f"{first['field']}: {first['message']}"
    elif first:
        message = first["message"]
    else:
        message = "Invalid request"
    return _error_response(request, status.HTTP_400_BAD_REQUEST, message, details=details)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ===== ROUTES =====

app.include_router(auth_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(budgets_router)
app.include_router(liabilities_router)
app.include_router(loans_router)
app.include_router(recurring_transactions_router)
app.include_router(savings_goals_router)
app.include_router(categories_router)
app.include_router(user_data_router)


@app.get("/")
def read_root():
    return {
        "name": "Personal Manager API",
        "version": API_VERSION,
        "endpoints": {
            "auth": ["/auth/signup", "/auth/login", "/auth/signin", "/auth/me"],
            "resources": [
                "/accounts",
                "/transactions",
                "/budgets",
                "/liabilities",
                "/loans",
                "/recurring-transactions",
                "/savings-goals",
                "/categories",
            ],
            "user_data": "/api/{accounts,transactions,loans,liabilities,budgets,recurring-transactions,savings-goals,preferences}",
            "health": "/health",
        },
    }


@app.get("/health", response_class=PlainTextResponse)
def health_check():
    return "OK"
