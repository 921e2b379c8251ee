"""Gateway settings loaded from the environment or a `.env` file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Upstream geolocation service
    upstream_scheme: str = "http"
    upstream_host: str = "localhost"
    upstream_port: int = 8080
    upstream_timeout_seconds: float = 5.0

    # Local HTTP listener
    http_interface: str = "0.0.0.0"
    http_port: int = 9000

    model_config = SettingsConfigDict(env_prefix="GEO_GATEWAY_", env_file=".env", extra="ignore")

    @property
    def upstream_base_url(self) -> str:
        return f"{self.upstream_scheme}://{self.upstream_host}:{self.upstream_port}"


settings = Settings()
