from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./vehicle_booking.sqlite3"
    cors_origins: list[str] = ["http://localhost:3000"]
    seed_on_startup: bool = True
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
