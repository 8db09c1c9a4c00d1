"""
Library Configuration
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Ambient settings loaded from environment variables"""

    # Environment
    environment: str = "development"
    service_name: str = "fuzzy-substring"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True  # False renders human-readable console output

    class Config:
        env_file = ".env"
        env_prefix = "FUZZY_SUBSTRING_"
        case_sensitive = False


settings = Settings()
