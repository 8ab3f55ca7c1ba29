# server/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import auth, products
from core.config import Settings
from core.context import build_context
from core.errors import NotAuthorized, StoreError
from core.logger import get_logger, setup_logger
from database import init_db


log = get_logger("main")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logger(settings.log_level)
    context = build_context(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(context.engine)
        log.info("Database ready")
        yield
        context.engine.dispose()

    app = FastAPI(title="Acme Auth Store", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, NotAuthorized) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=headers,
        )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(auth.router)
    app.include_router(products.router)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=8000)
