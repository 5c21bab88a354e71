"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from painel_admin.core.resources.base import EDIT_APPEND, EDIT_STRATEGIES

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 5.0


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).
    
    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)
    
    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback
    
    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name
    
    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
    
    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value
    
    return None


@dataclass
class AppConfig:
    """Application configuration container."""
    api_url: str = DEFAULT_API_URL
    api_token: str = ""
    request_timeout: float = DEFAULT_TIMEOUT
    edit_strategy: str = EDIT_APPEND
    log_level: str = "WARNING"

    @property
    def has_token(self) -> bool:
        return bool(self.api_token)


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"PAINEL_REQUEST_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError("PAINEL_REQUEST_TIMEOUT must be positive")
    return timeout


def load_settings() -> AppConfig:
    """Load client settings from environment and /run/secrets.
    
    Raises:
        ValueError: If a value is malformed (timeout, edit strategy)
    """
    api_url = (os.environ.get("PAINEL_API_URL") or DEFAULT_API_URL).rstrip("/")
    api_token = _load_secret_from_file("painel_api_token", "PAINEL_API_TOKEN") or ""
    request_timeout = _parse_timeout(os.environ.get("PAINEL_REQUEST_TIMEOUT"))
    
    edit_strategy = os.environ.get("PAINEL_EDIT_STRATEGY", EDIT_APPEND).strip().lower()
    if edit_strategy not in EDIT_STRATEGIES:
        raise ValueError(
            f"PAINEL_EDIT_STRATEGY must be one of {', '.join(EDIT_STRATEGIES)}, got {edit_strategy!r}"
        )
    
    log_level = os.environ.get("PAINEL_LOG_LEVEL", "WARNING").strip().upper()
    
    logger.info("api_url=%s; token=%s; edit_strategy=%s", api_url, "***" if api_token else "EMPTY", edit_strategy)
    
    return AppConfig(
        api_url=api_url,
        api_token=api_token,
        request_timeout=request_timeout,
        edit_strategy=edit_strategy,
        log_level=log_level,
    )
