from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from dotenv import load_dotenv

# Load env vars before anything else
load_dotenv()

from shopbudget.core.config import settings
from shopbudget.database import engine, Base
from shopbudget.models import Shop, Item, Budget  # noqa: F401  (registers tables)
from shopbudget.deps import require_token
from shopbudget.routers import shopping

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info(f"--- {settings.PROJECT_NAME} READY (auth {'on' if settings.SHOPPING_TOKEN else 'off'}) ---")


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def route_path(request: Request) -> str:
    path = request.url.path
    if settings.API_PREFIX and path.startswith(settings.API_PREFIX):
        path = path[len(settings.API_PREFIX):] or "/"
    return path


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Raised by routing itself (no route or wrong method), not by an endpoint
    if not isinstance(exc, HTTPException) and exc.status_code in (404, 405):
        return error_response(f"not found: {request.method} {route_path(request)}", 404)
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return error_response("; ".join(problems) or "invalid request", 400)


@app.middleware("http")
async def auth_and_errors(request: Request, call_next):
    # Registered before CORSMiddleware so CORS wraps every response produced here
    if request.method != "OPTIONS" and request.url.path != "/health":
        try:
            require_token(request.headers.get("authorization"))
        except HTTPException as exc:
            return error_response(exc.detail, exc.status_code)

    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(str(exc), 500)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["authorization", "content-type"],
)

app.include_router(shopping.router, prefix=settings.API_PREFIX)


@app.get("/health", include_in_schema=False)
def health():
    return {"ok": True}
