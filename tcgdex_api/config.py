from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TCGDEX_", extra="ignore")

    api_base_url: str = "https://api.tcgdex.net/v2/"
    default_lang: str = "en"

    # Applied to connect, read, write and pool timeouts alike
    timeout_seconds: float = 30.0

    user_agent: str = "tcgdex-api/0.1"


settings = Settings()
