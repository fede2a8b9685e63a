import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.exceptions import KeyServerError
from .core.storage import JsonFileGateway
from .routers.keys import router as keys_router
from .services.key_store import KeyStore

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[KeyStore] = None) -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)

    # Configure CORS
    raw_origins = settings.CORS_ORIGINS or "*"
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()] if isinstance(raw_origins, str) else raw_origins
    allow_credentials = False if "*" in origins else True
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.key_store = store if store is not None else KeyStore(JsonFileGateway(settings.KEYS_FILE))
    logger.info(f"Loaded {len(app.state.key_store)} keys")

    @app.exception_handler(KeyServerError)
    async def key_server_error(request: Request, exc: KeyServerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    # Routers
    app.include_router(keys_router)

    @app.get("/")
    def root():
        return {"status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


def run():
    app = create_app()
    logger.info(f"API running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
