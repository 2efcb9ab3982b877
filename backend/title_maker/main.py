import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from title_maker.auth import SIGN_IN_REQUIRED, get_caller
from title_maker.config import APP_NAME, CORS_ORIGINS, LOG_LEVEL
from title_maker.database import init_db
from title_maker.errors import ActionError, ActionValidationError, UnauthorizedError
from title_maker.routes import title_ideas, title_sessions

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(title_sessions.router, prefix="/api", tags=["title-sessions"])
app.include_router(title_ideas.router, prefix="/api", tags=["title-ideas"])


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # Malformed JSON is rejected before dependencies run, so the identity check never happened
    if get_caller(request) is None and any(err.get("type") == "json_invalid" for err in errors):
        return await action_error_handler(request, UnauthorizedError(SIGN_IN_REQUIRED))

    message = "; ".join(str(err.get("msg", "")) for err in errors) or "Invalid input"
    return JSONResponse(
        status_code=ActionValidationError.status_code,
        content={
            "error": {
                "code": ActionValidationError.code,
                "message": message,
                "issues": jsonable_encoder(errors),
            }
        },
    )


@app.on_event("startup")
def on_startup():
    init_db()
    for r in app.routes:
        methods = getattr(r, "methods", None)
        path = getattr(r, "path", None)
        if path:
            logger.debug("%-20s %s", ", ".join(sorted(methods)) if methods else "N/A", path)
    logger.info("%s started", APP_NAME)


@app.get("/api/health")
def health_check():
    """Diagnostic endpoint to verify the service is up"""
    return {"app_name": APP_NAME, "status": "healthy"}
