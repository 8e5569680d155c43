from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    api_key: str | None = None
    api_base_url: str = "https://maps.googleapis.com/maps/api/geocode/json"
    default_language: str = "en-GB"   # sent as `language` unless the caller supplies one
    country_language: str = "en"      # locale for country display names
    timeout: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="GEOCODING_",
        env_file=".env",
        extra="ignore",
    )

settings = Settings()
