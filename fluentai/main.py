"""
FluentAI web service: lesson pages and the assistant JSON API.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from starlette.status import HTTP_405_METHOD_NOT_ALLOWED

from fluentai import __version__, config
from fluentai.dependencies import close_orchestrator
from fluentai.errors import LessonServiceError, MethodNotAllowed
from fluentai.routers import assistant, pages

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FluentAI",
    description="Personalized language lessons written by an OpenAI assistant",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SessionMiddleware, secret_key=config.SESSION_SECRET_KEY)

app.include_router(assistant.router)
app.include_router(pages.router)


@app.exception_handler(LessonServiceError)
async def lesson_error_handler(request: Request, exc: LessonServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = str(exc.detail)
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        message = MethodNotAllowed(request.method).message
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"error": problems})


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting FluentAI {__version__} (assistant {config.ASSISTANT_ID})")
    if not config.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set, lesson generation will fail")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Stopping FluentAI")
    await close_orchestrator()


@app.get("/health")
async def health():
    return {"status": "ok", "version": app.version}


def run():
    import uvicorn
    uvicorn.run(
        "fluentai.main:app",
        host=config.HOST,
        port=config.PORT,
    )


if __name__ == "__main__":
    run()
