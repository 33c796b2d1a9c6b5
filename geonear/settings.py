from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GEONEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default column names for the relational condition when options omit them
    latitude_column_name: str = "latitude"
    longitude_column_name: str = "longitude"
    log_level: str = "INFO"  # Used by scripts/filter_nearby.py


def get_settings() -> Settings:
    return Settings()
