import logging
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from .catalog import QuestionCatalog
from .models import CatalogConfig, CatalogConfigurationError

logger = logging.getLogger(__name__)


def load_catalog_data(data: Dict[str, Any]) -> QuestionCatalog:
    """
    Validates raw catalog data against the CatalogConfig model and builds
    a QuestionCatalog from it, which runs the cross-question checks.
    """
    try:
        config = CatalogConfig.model_validate(data)
    except ValidationError as e:
        raise CatalogConfigurationError(f"Invalid catalog definition: {e}") from e
    return QuestionCatalog(config)


def load_catalog_from_file(file_path: str) -> QuestionCatalog:
    """
    Loads a question catalog from a YAML file, validates it,
    and returns a QuestionCatalog.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise CatalogConfigurationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise CatalogConfigurationError(f"Error parsing YAML file {file_path}: {e}")

    if not isinstance(data, dict):
        raise CatalogConfigurationError(f"YAML file is empty or invalid: {file_path}")

    catalog = load_catalog_data(data)
    logger.info(f"Loaded question catalog {catalog.version} from {file_path}")
    return catalog
