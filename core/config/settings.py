from typing import List, Literal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "User Management Service"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # Database settings
    async_database_url: str = "sqlite+aiosqlite:///./users.db"

    # "sql" persists through SQLAlchemy, "memory" keeps users in process
    user_store: Literal["sql", "memory"] = "sql"

    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"


settings = Settings()
