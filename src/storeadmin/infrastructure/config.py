"""Runtime configuration, read from the environment.

The identity-service bearer token is only ever supplied from outside
(environment or CLI option); there is no built-in credential.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from storeadmin.domain.exceptions import ValidationError

DEFAULT_BASE_URL = "http://api-yody.vutran.id.vn/api"
DEFAULT_TIMEOUT = 30.0

ENV_BASE_URL = "STOREADMIN_API_BASE_URL"
ENV_TOKEN = "STOREADMIN_API_TOKEN"
ENV_TIMEOUT = "STOREADMIN_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    api_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        raw_timeout = env.get(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValidationError(
                    f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
                ) from exc
            if timeout <= 0:
                raise ValidationError(f"{ENV_TIMEOUT} must be positive")

        return Settings(
            base_url=env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            api_token=env.get(ENV_TOKEN) or None,
            timeout=timeout,
        )

    def override(self, base_url: str | None = None, api_token: str | None = None) -> Settings:
        """Apply CLI options on top of the environment."""
        return replace(
            self,
            base_url=base_url or self.base_url,
            api_token=api_token or self.api_token,
        )

    def credentials(self) -> str | None:
        """Credential provider handed to gateways that need a bearer token."""
        return self.api_token
