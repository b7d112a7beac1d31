from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # development / production, display only
    env: str = Field(default="development", validation_alias=AliasChoices("ENV", "NODE_ENV"))
    port: int = 5000
    log_level: str = "INFO"

    service_name: str = "King Solarman Backend"
    version: str = "1.1.0"
    public_url: str = "https://king-solarman-backend-railway.up.railway.app"

    cors_origins: list[str] = [
        "http://localhost:3000",
        "https://king-solarman-frontend.vercel.app",
        "https://kingsolarman.co.bw",
    ]

    sandbox_paypal_client_id: SecretStr | None = None
    sandbox_paypal_client_secret: SecretStr | None = None
    live_paypal_client_id: SecretStr | None = None
    live_paypal_client_secret: SecretStr | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def local_url(self) -> str:
        return f"http://localhost:{self.port}"

    @property
    def base_url(self) -> str:
        return self.public_url if self.is_production else self.local_url


def secret_is_set(secret: SecretStr | None) -> bool:
    return bool(secret and secret.get_secret_value())


settings = Settings()
