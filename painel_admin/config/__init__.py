"""Configuration module for the admin panel client."""
from .settings import AppConfig, load_settings

__all__ = ["AppConfig", "load_settings"]
