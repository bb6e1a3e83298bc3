from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "monAppelOffreApp"
    API_PREFIX: str = "/api"
    DATABASE_URL: str = "postgresql://user:password@db:5432/monappeloffre"
    SECRET_KEY: str = "dev-secret-change-me"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600
    CORS_ORIGINS: List[str] = ["http://localhost:9000"]
    WEB_ROOT: str = "webapp"
    IMAGES_DIR: str = "content/images"
    UVICORN_HOST: str = "0.0.0.0"
    UVICORN_PORT: int = 8080
    LOG_LEVEL: str = "info"
    LOG_DIR: str = "logs"

    model_config = {
        "env_file": ".env"
    }

    @property
    def web_root(self) -> Path:
        return Path(self.WEB_ROOT)

    @property
    def images_dir(self) -> Path:
        """Absolute directory where project photos are written."""
        return self.web_root / self.IMAGES_DIR

    @property
    def log_dir(self) -> Path:
        return Path(self.LOG_DIR)


settings = Settings()
