# app/main.py
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
import uvicorn

from app.data.database import Base, engine
from app.data.models import UserModel  # noqa: F401 rejestracja w Base.metadata
from app.api import api_router
from app.api.errors import setup_error_handling
from app.utils.retry import db_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@db_retry()
def init_db(bind=engine):
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="User Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_error_handling(app)

    # Include routers
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(STATIC_DIR / "index.html")

    return app


app = create_app()


def run():
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
