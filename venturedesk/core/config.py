import os

from dotenv import load_dotenv

from venturedesk.core.errors import ConfigError

load_dotenv()


class Settings:
    # Database
    # No default: scripts fail on first use when DATABASE_URL is missing.
    DATABASE_URL: str | None = os.getenv("DATABASE_URL") or None

    # Object storage (Cloudflare R2 or any S3-compatible endpoint)
    R2_ENDPOINT: str | None = os.getenv("R2_ENDPOINT") or None
    R2_ACCESS_KEY_ID: str | None = os.getenv("R2_ACCESS_KEY_ID") or None
    R2_SECRET_ACCESS_KEY: str | None = os.getenv("R2_SECRET_ACCESS_KEY") or None
    R2_BUCKET_NAME: str = os.getenv("R2_BUCKET_NAME", "venturedesk-images")
    R2_PUBLIC_URL: str | None = os.getenv("R2_PUBLIC_URL") or None

    # Local image tree walked by the asset migration
    IMAGES_DIR: str = os.getenv("IMAGES_DIR", "public/images")

    # App
    API_KEY_HEADER: str = os.getenv("API_KEY_HEADER", "X-API-Key")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "5000"))

    def require(self, name: str) -> str:
        """Return a configured value or raise ConfigError naming the variable."""
        value = getattr(self, name, None)
        if not value:
            raise ConfigError(f"{name} environment variable is not set")
        return value

    @property
    def r2_endpoint(self) -> str:
        # Dashboards hand out the endpoint with the bucket appended.
        endpoint = self.require("R2_ENDPOINT").rstrip("/")
        suffix = "/" + self.R2_BUCKET_NAME
        if endpoint.endswith(suffix):
            endpoint = endpoint[: -len(suffix)]
        return endpoint


settings = Settings()
