from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

KNOWN_RESOLVERS = ("social", "page")


class ResolverSettings(BaseSettings):
    # Fallback order used by the lead image selector
    ORDER: List[str] = ["social", "page"]

    @field_validator("ORDER")
    @classmethod
    def _check_order(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in KNOWN_RESOLVERS]
        if unknown:
            raise ValueError(f"Unknown resolver(s): {', '.join(unknown)}")
        return value

    class Config:
        env_prefix = "LEADIMAGE_RESOLVER_"
        case_sensitive = True

class ServerSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    class Config:
        env_prefix = "LEADIMAGE_SERVER_"
        case_sensitive = True

class LoggingSettings(BaseSettings):
    LEVEL: str = "INFO"
    FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    class Config:
        env_prefix = "LEADIMAGE_LOG_"
        case_sensitive = True

class AppSettings(BaseSettings):
    RESOLVER: ResolverSettings = ResolverSettings()
    SERVER: ServerSettings = ServerSettings()
    LOGGING: LoggingSettings = LoggingSettings()

    class Config:
        env_file = ".env"
        env_prefix = "LEADIMAGE_"
        case_sensitive = True

settings = AppSettings()
