"""Data transfer objects for serializing error chains."""

from .error_body import ErrorBodyDTO, error_body

__all__ = ["ErrorBodyDTO", "error_body"]
