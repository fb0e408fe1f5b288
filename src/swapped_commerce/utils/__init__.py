"""Helper utilities."""

from .sanitizer import mask_secret, mask_sensitive_data, sanitize_headers

__all__ = [
    "mask_secret",
    "mask_sensitive_data",
    "sanitize_headers",
]
