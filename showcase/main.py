# showcase/main.py
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import threading
import logging

from showcase.config.settings import settings
from showcase.delivery.api.showcase import router
from showcase.domain.showcase_builder import ShowcaseBuilder

logger = logging.getLogger("uvicorn.error")

# --- Lazy service bootstrap state ---
_service_lock = threading.Lock()
_service_ready = False

def _ensure_service(app: FastAPI) -> None:
    global _service_ready
    with _service_lock:
        if _service_ready:
            return
        logger.info("Initializing ShowcaseBuilder (lazy-init)...")
        builder = ShowcaseBuilder()
        app.state.showcase_builder = builder
        _service_ready = True
        logger.info(f"ShowcaseBuilder ready with {len(builder.patterns)} layout patterns.")

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Service '{settings.PROJECT_NAME}' starting (mode: {settings.ENVIRONMENT}).")
    yield
    logger.info("Service stopped.")

app = FastAPI(
    title="Showcase Layout Service",
    description="Deterministic seeded layout of photo collections into showcase panels",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Lazy-load only for API routes
@app.middleware("http")
async def lazy_boot(request: Request, call_next):
    if request.url.path.startswith(settings.API_V1_STR):
        _ensure_service(request.app)
    return await call_next(request)

app.include_router(router, prefix=settings.API_V1_STR)

@app.get("/")
async def root():
    return {"message": settings.PROJECT_NAME, "version": "1.0.0", "status": "ok"}

@app.get("/health")
async def health_check():
    return {"status": "ok", "service": settings.PROJECT_NAME, "builder_ready": _service_ready}
