from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    # Provider secrets - must be provided via environment variables
    turnstile_secret_key: Optional[str] = None
    resend_api_key: Optional[str] = None

    # Provider endpoints
    turnstile_verify_url: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"
    resend_api_url: str = "https://api.resend.com/emails"

    # Outbound mail
    brand_name: str = "LucenDEX"
    mail_from: str = "LucenDEX <noreply@lucendex.com>"
    mail_to: str = "hello@lucendex.com"

    # Header set by the edge proxy with the caller's address
    client_ip_header: str = "CF-Connecting-IP"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def effective_turnstile_secret(self) -> str:
        """Get the Turnstile secret, empty if not configured"""
        return self.turnstile_secret_key or ""

    @property
    def effective_resend_api_key(self) -> str:
        """Get the Resend API key, empty if not configured"""
        return self.resend_api_key or ""

def get_settings():
    # Not cached: read fresh for every request
    return Settings()
