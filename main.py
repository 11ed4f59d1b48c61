import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from routers.health import router as health_router
from routers.problems import router as problems_router
from routers.submissions import router as submissions_router
from textgen import GeminiTextGenerator

logger = logging.getLogger("math-practice")
logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Singapore Primary Math Practice API")

# Allow calls from the Next.js dev server and configured production sites
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Built once here and handed to handlers through deps.providers
app.state.text_generator = GeminiTextGenerator(
    api_key=config.GEMINI_API_KEY, model=config.GEMINI_MODEL
)
if not config.GEMINI_API_KEY:
    logger.warning("GEMINI_API_KEY is not set; all problems and feedback will use fallbacks")


# Every error leaves the API as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {msg}"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(problems_router)  # /api/math-problem
app.include_router(submissions_router)  # /api/submit-answer
app.include_router(health_router)  # /health/...
