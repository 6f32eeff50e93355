import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from utils.format_error import format_error, format_validation_errors

from routers import contact_router
import uvicorn
import logging
from db import connect_to_mongo, close_mongo_connection
from starlette.exceptions import HTTPException as StarletteHTTPException

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_mongo()
    yield
    await close_mongo_connection()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    report = format_error(request, code=exc.status_code, exception=exc.detail)
    if exc.status_code >= 500:
        logger.error(report)
    else:
        logger.info(report)

    # only the public message leaves the server
    message = exc.detail.get("message") if isinstance(exc.detail, dict) else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.info(f"Rejected payload on {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"errors": errors})


@app.get("/", response_class=PlainTextResponse)
def root():
    return "API is up and running!"


app.include_router(contact_router)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    host = os.environ.get("HOST", "0.0.0.0")
    logger.info(f"API server running at http://localhost:{port}")
    try:
        uvicorn.run(app, host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Shutting down due to KeyboardInterrupt...")
