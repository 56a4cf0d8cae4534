"""Loading of JSON resource catalogs used for localized control text."""

import json
import logging
import os
from typing import Dict

from dashboard.language.language_code import LanguageCode
from dashboard.localization.localization_error import ResourceCatalogError


logger = logging.getLogger("ResourceCatalog")


def resolve_resource_path(resource_file: str, resource_root: str) -> str:
    """
    Turn a resource file reference into a filesystem path.

    References starting with "~/" are application-relative, as are plain relative
    references; both are resolved against the resource root.

    Args:
        resource_file: Resource file reference as declared by a container
        resource_root: Directory that application-relative references live under

    Returns:
        Filesystem path of the resource file
    """
    if resource_file.startswith(("~/", "~\\")):
        # Application-relative references always stay under the root
        return os.path.join(resource_root, resource_file[1:].lstrip("/\\"))

    if os.path.isabs(resource_file):
        return resource_file

    return os.path.join(resource_root, resource_file)


def culture_resource_path(path: str, language: LanguageCode) -> str:
    """
    Get the culture-specific variant of a resource file path.

    Args:
        path: Path of the neutral resource file, e.g. "Message.json"
        language: Language to get the variant for

    Returns:
        Path of the culture-specific file, e.g. "Message.fr.json"
    """
    stem, ext = os.path.splitext(path)
    return f"{stem}.{language.culture_suffix()}{ext}"


def load_resource_catalog(path: str) -> Dict[str, str]:
    """
    Load a resource catalog from a JSON file.

    A missing file is an empty catalog.

    Args:
        path: Path of the resource file

    Returns:
        Mapping from resource key to localized text

    Raises:
        ResourceCatalogError: If the file cannot be read, is not valid JSON, or is not
            an object mapping strings to strings
    """
    if not os.path.exists(path):
        logger.debug("Resource file '%s' not found, using empty catalog", path)
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

    except json.JSONDecodeError as e:
        raise ResourceCatalogError(f"Invalid JSON in resource file: {e}", path) from e

    except UnicodeDecodeError as e:
        raise ResourceCatalogError(f"Resource file is not valid UTF-8: {e}", path) from e

    except OSError as e:
        raise ResourceCatalogError(f"Failed to read resource file: {e}", path) from e

    if not isinstance(data, dict):
        raise ResourceCatalogError("Resource file must contain a JSON object", path)

    for key, value in data.items():
        if not isinstance(value, str):
            raise ResourceCatalogError(f"Resource '{key}' is not a string", path)

    return data
