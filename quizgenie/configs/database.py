"""
Database configuration settings.

Connection parameters for the asyncpg-backed SQLAlchemy engine.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for the ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from quizgenie.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration."""

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="quizgenie", description="Database holding documents and quizzes")
    require_ssl: bool = Field(default=False, description="Require TLS for connections")

    # Pool (API-side engine only; workers connect without a pool)
    pool_size: int = Field(default=10, description="Persistent pooled connections")
    max_overflow: int = Field(default=20, description="Connections allowed beyond pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False, description="Log every SQL statement")

    @property
    def async_database_url(self) -> URL:
        """
        Build the asyncpg connection URL.

        Returns:
            URL: SQLAlchemy URL using the postgresql+asyncpg driver
        """
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
            query={"ssl": "require"} if self.require_ssl else {},
        )
