from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./shipyard.db"
    # Raw countermeasure units packed into one installed set
    countermeasure_units_per_set: int = 4
    allowed_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]


settings = Settings()
