"""
Environment variable configuration loader for the Outseta SDK.

Lets deployments supply the API location and credentials without code
changes. A ``.env`` file in the working directory is read first.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .http import RequestMakerType

logger = logging.getLogger(__name__)


@dataclass
class EnvConfig:
    """Client settings read from the environment."""
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    access_key: Optional[str] = None
    request_maker: RequestMakerType = RequestMakerType.DEFAULT


def load_config_from_env(dotenv_path: Optional[str] = None) -> EnvConfig:
    """
    Load client settings from environment variables.

    Environment variables:
        OUTSETA_BASE_URL: API base URL, e.g. https://<domain>.outseta.com/api/v1
        OUTSETA_API_KEY: Server-side API key, sent as the Authorization header
        OUTSETA_ACCESS_KEY: User access token, sent as a bearer token
        OUTSETA_REQUEST_MAKER: Request maker type (DEFAULT/HTTP_CLIENT)

    Args:
        dotenv_path: Optional path of the .env file to read

    Returns:
        EnvConfig: Settings loaded from the environment
    """
    load_dotenv(dotenv_path)
    config = EnvConfig()

    if base_url := os.getenv('OUTSETA_BASE_URL'):
        config.base_url = base_url.rstrip('/')  # Paths start with a slash

    if api_key := os.getenv('OUTSETA_API_KEY'):
        config.api_key = api_key

    if access_key := os.getenv('OUTSETA_ACCESS_KEY'):
        config.access_key = access_key

    if request_maker := os.getenv('OUTSETA_REQUEST_MAKER'):
        try:
            config.request_maker = RequestMakerType[request_maker.strip().upper()]
        except KeyError:
            logger.warning(
                f"Invalid request maker value: {request_maker}, using default: {config.request_maker.value}"
            )

    if config.request_maker is RequestMakerType.INVALID:
        logger.warning(f"Request maker INVALID is not usable, using default: {RequestMakerType.DEFAULT.value}")
        config.request_maker = RequestMakerType.DEFAULT

    return config
