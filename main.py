import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from infrastructure.database.connection import create_tables
from presentation.api import user_routes
from presentation.middleware.cors import add_cors_middleware
from core.config.logging_config import setup_logging
from core.config.settings import settings

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.user_store == "sql":
        await create_tables()
    logger.info(f"{settings.app_name} started with {settings.user_store} user store")
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan
)

add_cors_middleware(app)

app.include_router(user_routes.router)


@app.get("/")
async def root():
    return {"message": "User Management Service", "version": settings.app_version}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
