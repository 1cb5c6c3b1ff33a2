from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Externally reachable origin used to build feedback links, e.g. https://reviews.example.com
    public_base_url: str = Field("", alias="PUBLIC_BASE_URL")

    # Number of students the roster stub assigns per instructor/month
    seed_sample_size: int = Field(3, alias="SEED_SAMPLE_SIZE", ge=1)
    seed_on_startup: bool = Field(True, alias="SEED_ON_STARTUP")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
