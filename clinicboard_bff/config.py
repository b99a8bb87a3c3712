from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, Optional


class Settings(BaseSettings):
    # App config
    app_name: str = "ClinicBoard BFF"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "default"
    logging_config_path: Optional[str] = None

    # Upstream services are reached through the API gateway
    gateway_url: str = "http://localhost:8080"

    # Redis (token cache)
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: Optional[str] = None
    redis_sentinel_enabled: bool = False
    redis_sentinel_host: str = "redis-sentinel"
    redis_sentinel_port: int = 26379
    redis_sentinel_master: str = "mymaster"

    # Access token cache entry
    access_token_key: str = "access_token"
    access_token_ttl_seconds: int = 3600

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @property
    def base_urls(self) -> Dict[str, str]:
        """Root URLs of the upstream services behind the gateway"""
        gateway = self.gateway_url.rstrip("/")
        return {
            "USERS_SERVICE": f"{gateway}/user-service",
            "BUSINESS_SERVICE": f"{gateway}/business-service",
        }


settings = Settings()
