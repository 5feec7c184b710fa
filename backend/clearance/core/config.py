"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

from .constants import DefaultAdmin, ReferenceNumber


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    ENVIRONMENT: str = Field(default="development")

    # Database
    DB_HOST: str = Field(default="localhost")
    DB_USER: str = Field(default="root")
    DB_PASSWORD: str = Field(default="")
    DB_NAME: str = Field(default="masvingo_clearance")
    DB_PORT: int = Field(default=3306)
    DB_ECHO: bool = Field(default=False)
    DATABASE_URL: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL. When set it takes precedence over the DB_* values."
    )

    # Reference numbers
    REFERENCE_YEAR: int = Field(
        default=ReferenceNumber.DEFAULT_YEAR,
        description="Year embedded in generated reference numbers (RCC-<year>-<suffix>)"
    )

    # Default admin account seeded at initialization
    DEFAULT_ADMIN_USERNAME: str = Field(default=DefaultAdmin.USERNAME)
    DEFAULT_ADMIN_PASSWORD: str = Field(default=DefaultAdmin.PASSWORD)
    DEFAULT_ADMIN_FULL_NAME: str = Field(default=DefaultAdmin.FULL_NAME)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator('DB_PORT', mode='after')
    @classmethod
    def validate_port(cls, v):
        """Validate DB_PORT is a usable TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError(f"DB_PORT must be between 1 and 65535, got {v}")
        return v

    @field_validator('REFERENCE_YEAR', mode='after')
    @classmethod
    def validate_reference_year(cls, v):
        """Validate REFERENCE_YEAR renders as exactly four digits."""
        if not 1000 <= v <= 9999:
            raise ValueError(f"REFERENCE_YEAR must be a four-digit year, got {v}")
        return v

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize LOG_LEVEL and reject unknown level names."""
        level = v.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"LOG_LEVEL must be a standard logging level name, got '{v}'")
        return level

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL for the async engine.

        Built from the DB_* values against the aiomysql driver unless
        DATABASE_URL overrides it.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)

        return URL.create(
            drivername="mysql+aiomysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
