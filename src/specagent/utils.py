"""
Name: Utility functions.
Description: Common utility functions for specagent, including logging setup, loading OpenAPI spec text from files or URLs, reading agent configuration files and substituting environment variables.
"""

import json
import logging
import os
import sys
from typing import Any, Dict, Optional, Tuple

import requests
import yaml
from pydantic import BaseModel, Field, model_validator

from .constants import DEFAULT_SPEC_DOWNLOAD_TIMEOUT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    """Configure logging for the application.

    Args:
        debug: Whether to enable debug mode
    """
    logging_level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(logging_level)

    # Set httpx logger to WARNING to reduce HTTP request logging
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Check if handlers are already configured to prevent duplicates
    if root_logger.handlers:
        for handler in root_logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setLevel(logging_level)
        return

    # Log to stderr so that stdout stays free for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging_level)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def setup_environment(debug: bool = False):
    """Setup the environment for the application.

    - Configures logging
    - Loads environment variables from .env file
    """
    configure_logging(debug)

    from dotenv import load_dotenv

    load_dotenv()
    logger.debug("Loaded environment variables from .env file")


def load_spec_text(file_path: str) -> str:
    """Load the raw text of an OpenAPI spec from a file.

    Args:
        file_path: Path to the OpenAPI spec file

    Returns:
        The spec text, unparsed
    """
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def load_spec_text_from_url(url: str) -> str:
    """Load the raw text of an OpenAPI spec from a URL.

    Args:
        url: URL to the OpenAPI spec

    Returns:
        The spec text, unparsed
    """
    response = requests.get(url, timeout=DEFAULT_SPEC_DOWNLOAD_TIMEOUT)
    response.raise_for_status()
    return response.text


def describe_spec(spec_text: str) -> Tuple[str, str]:
    """Read the title and description from an OpenAPI spec.

    The document is not validated. JSON specs are valid YAML, so both formats
    are handled by the YAML loader.

    Args:
        spec_text: Raw spec text

    Returns:
        Tuple of (title, description), empty strings when unavailable
    """
    try:
        document = yaml.safe_load(spec_text)
    except yaml.YAMLError as e:
        logger.warning(f"Unable to read spec metadata: {e}")
        return "", ""

    if not isinstance(document, dict) or not isinstance(document.get("info"), dict):
        return "", ""

    info = document["info"]
    return str(info.get("title") or ""), str(info.get("description") or "")


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load a configuration file in JSON or YAML format.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dict containing the configuration
    """
    _, ext = os.path.splitext(file_path)
    with open(file_path, "r", encoding="utf-8") as f:
        if ext.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif ext.lower() == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {file_path} must be a mapping")
    return data


def substitute_env_vars(value: str) -> str:
    """Substitute environment variables in a string.

    Handles `{VAR_NAME}`. Keeps the original value if a referenced
    environment variable is not found.

    Args:
        value: String potentially containing environment variable references

    Returns:
        String with environment variables substituted
    """
    if not value or not isinstance(value, str):
        return value

    # Only proceed if there are potential variables to substitute
    if "{" not in value:
        return value

    try:
        return value.format(**os.environ)
    except KeyError as e:
        logger.warning(f"Environment variable {e} referenced in config not found")
        return value
    except (ValueError, IndexError, AttributeError):
        logger.warning(f"Invalid format string in config: '{value}'")
        return value


class AgentConfig(BaseModel):
    """Configuration for an API assistant."""

    name: str
    description: str = ""
    openapi_spec_path: Optional[str] = None
    openapi_spec_url: Optional[str] = None
    spec_text: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @model_validator(mode="after")
    def check_spec_source(self) -> "AgentConfig":
        """Require exactly one place to load the spec from."""
        if bool(self.openapi_spec_path) == bool(self.openapi_spec_url):
            raise ValueError(
                "Exactly one of 'openapi_spec_path' or 'openapi_spec_url' must be set"
            )
        return self

    @property
    def server_name(self) -> str:
        """Get the standardized server name (lowercase with underscores).

        Returns:
            Standardized server name for use in URLs and file paths
        """
        return self.name.lower().replace(" ", "_") if self.name else ""
