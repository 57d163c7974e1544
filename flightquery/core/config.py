from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    APP_NAME: str = "Flight Query API"
    # Comma-separated origins for CORS. If empty, all origins are allowed.
    CORS_ORIGINS: str = ""
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000

    DB_USER: str = ""
    DB_PASSWORD: str = ""
    DB_CONNECTION_STRING: str = ""  # e.g. dbhost:1521/FREEPDB1 or a tnsnames alias

    # Full SQLAlchemy URL; when set it takes precedence over the DB_* parts above.
    DATABASE_URL: str = ""

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """A bare oracle:// URL would make SQLAlchemy load cx_Oracle; we ship python-oracledb."""
        if v and v.startswith("oracle://"):
            return "oracle+oracledb://" + v[9:]
        return v

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]
