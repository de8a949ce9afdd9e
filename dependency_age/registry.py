"""
npm registry client.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

import requests

from .exceptions import FetchError
from .interfaces import RegistryClient
from .time_utils import parse_timestamp


logger = logging.getLogger(__name__)

NPM_REGISTRY_URL = "https://registry.npmjs.org"


class NpmRegistryClient(RegistryClient):
    """Fetch package documents from the npm registry, one request at a time."""

    def __init__(
        self,
        registry_url: str = NPM_REGISTRY_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.registry_url = registry_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def fetch_package_metadata(self, package_name: str, version: Optional[str] = None) -> Dict:
        """Fetch the full registry document for a package.

        Args:
            package_name: Name of the package
            version: Installed version, only used to label errors

        Returns:
            Package metadata as dictionary

        Raises:
            FetchError: on transport errors, HTTP errors or a non-JSON body
        """
        url = f"{self.registry_url}/{package_name}"
        logger.info("Fetching metadata for %s", package_name)
        try:
            with self.session.get(url, timeout=self.timeout) as response:
                response.raise_for_status()
                data = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise FetchError(package_name, version, f"invalid JSON ({e})") from e
        except requests.RequestException as e:
            raise FetchError(package_name, version, f"request failed ({e})") from e
        except ValueError as e:
            raise FetchError(package_name, version, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise FetchError(package_name, version, "expected a JSON object")
        return data

    def get_release_date(self, package_name: str, version: str) -> Optional[datetime]:
        """Return the publish date of an exact version, or None if the registry has none."""
        metadata = self.fetch_package_metadata(package_name, version)
        time_data = metadata.get('time')
        if not isinstance(time_data, dict):
            logger.debug("No time map in registry document for %s", package_name)
            return None

        timestamp = time_data.get(version)
        if not isinstance(timestamp, str):
            return None
        return parse_timestamp(timestamp)
