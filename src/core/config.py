from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class AssessmentSettings(BaseSettings):
    catalog_path: Optional[str] = None  # YAML question catalog; built-in bank when unset
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='ASSESSMENT_')


def get_settings() -> AssessmentSettings:
    return AssessmentSettings()
