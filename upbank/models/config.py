"""Configuration loading for upbank."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from upbank import credentials, paths
from upbank.client import BASE_URL, DEFAULT_TIMEOUT, UpClient
from upbank.models.credentials import AccessToken


class Config(BaseModel):
    """Configuration for upbank (access token, API location, defaults)."""

    access_token: AccessToken
    base_url: str = BASE_URL
    timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT, gt=0)
    page_size: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def load(cls, config_path: Path = None):
        """Load settings from config.yml (if present) and the token from keyring."""
        config_path = config_path or paths.get_default_config_path()

        values = {}
        if config_path.exists():
            with open(config_path, 'r') as f:
                values = yaml.safe_load(f) or {}

        # The token only comes from the keyring or UP_ACCESS_TOKEN
        values.pop("access_token", None)

        return cls(access_token=credentials.get_access_token(), **values)

    def client(self) -> UpClient:
        return UpClient(self.access_token.value, base_url=self.base_url, timeout=self.timeout)
