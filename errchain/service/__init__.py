"""Transport adapters mapping error chains to HTTP responses."""

from .handlers import error_response, install_error_handlers

__all__ = ["error_response", "install_error_handlers"]
