"""
Environment configuration for the Swapped Commerce client.

Example:
    >>> from swapped_commerce.core.env_config import load_from_env
    >>>
    >>> # SWAPPED_API_KEY and friends from the environment / .env
    >>> config = load_from_env()
    >>>
    >>> # With overrides
    >>> config = load_from_env(max_retries=0)
"""

from .loader import load_from_env, load_settings
from .settings import SwappedSettings

__all__ = [
    "load_from_env",
    "load_settings",
    "SwappedSettings",
]
