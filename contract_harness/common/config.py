"""Configuration for the contract harness.

Settings come from environment variables, a ``.env`` file, or the defaults
below. Field names double as environment variable names (case-insensitive),
so ``CONTRACT_BASE_URL=http://localhost:8080/api`` points the suite at a
local mirror.

The exact error strings returned by the dog API are literal contracts of the
current service implementation. They live here as settings rather than being
derived in code.

Usage
- ``config = HarnessConfig()``
- ``config.route_not_found_message("/breeds/image/randomm")``
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HarnessConfig(BaseSettings):
    """Settings shared by the client, the case table and the test fixtures."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    contract_env: str = Field(default="local")

    # Target service
    contract_base_url: str = Field(default="https://dog.ceo/api")
    # Prefix the service echoes back in route-not-found messages
    contract_route_base_url: str = Field(default="http://dog.ceo/api")
    contract_timeout_seconds: float = Field(default=30.0)

    # Logging
    contract_log_level: str = Field(default="INFO")
    contract_log_format: str = Field(default="console")

    # Image URL contract
    contract_image_url_prefix: str = Field(default="https://images.dog.ceo/breeds/")
    contract_image_extensions: List[str] = Field(default_factory=lambda: [".jpg", ".jpeg", ".png"])

    # Catalog size floor for /breeds/list/all
    contract_min_breed_count: int = Field(default=50)

    # Literal error messages
    contract_breed_not_found_message: str = Field(
        default="Breed not found (main breed does not exist)"
    )
    contract_route_not_found_template: str = Field(
        default='No route found for "GET {url}" with code: 0'
    )

    def route_not_found_message(self, path: str) -> str:
        """Render the 404 message the service returns for ``path``."""
        url = f"{self.contract_route_base_url.rstrip('/')}/{path.lstrip('/')}"
        return self.contract_route_not_found_template.format(url=url)


def get_config() -> HarnessConfig:
    """Build a fresh ``HarnessConfig`` from the current environment."""
    return HarnessConfig()
