import os
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.readiness_engine.catalog import QuestionCatalog, default_catalog
from services.readiness_engine.loader import load_catalog_from_file

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class AppSettings(BaseSettings):
    log_level: str = "INFO"
    catalog_path: Optional[str] = None  # YAML catalog overriding the embedded one
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='READINESS_')


# Instantiate settings
settings = AppSettings()


@lru_cache(maxsize=8)
def _file_catalog(path: str) -> QuestionCatalog:
    return load_catalog_from_file(path)


def get_catalog(app_settings: Optional[AppSettings] = None) -> QuestionCatalog:
    """
    Returns the catalog served by the API: the YAML file named by
    READINESS_CATALOG_PATH when set, otherwise the embedded catalog.
    Raises CatalogConfigurationError for a bad file.
    """
    app_settings = app_settings or settings
    if app_settings.catalog_path:
        return _file_catalog(app_settings.catalog_path)
    return default_catalog()
