"""
Interfaces for registry clients.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional, Protocol


class RegistryClient(Protocol):
    """Look up publish dates for package versions."""

    def fetch_package_metadata(self, package_name: str) -> Dict:
        ...

    def get_release_date(self, package_name: str, version: str) -> Optional[datetime]:
        ...
