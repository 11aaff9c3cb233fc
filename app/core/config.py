from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Trip Distance API"
    api_prefix: str = "/api"

    # Google Maps API key for Geocoding and Time Zone lookups (required)
    # GOOGLE_MAPS_API_KEY: a missing key fails at startup, not per request
    google_maps_api_key: str

    # MAPS_API_BASE_URL: Google Maps Platform web service root
    maps_api_base_url: str = "https://maps.googleapis.com/maps/api"

    # Timeout in seconds applied to every outbound Maps call
    maps_request_timeout: float = 10.0

    # Debug flag
    debug: bool = Field(default=False, alias="DEBUG")

    @property
    def geocode_url(self) -> str:
        """Derive Geocoding API endpoint from base URL."""
        return f"{self.maps_api_base_url.rstrip('/')}/geocode/json"

    @property
    def timezone_url(self) -> str:
        """Derive Time Zone API endpoint from base URL."""
        return f"{self.maps_api_base_url.rstrip('/')}/timezone/json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
