from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SOLAR_", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "Solar Architect"

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    engine_log_level: str | None = None

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Design cache (0 disables memoisation)
    design_cache_size: int = 32

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
