"""errchain.config.defaults
=======================

Central place for the small, stable default values used across errchain.
They can be overridden via environment variables, an external config file or
in-code overrides (see ``errchain.config``).

This module avoids importing from other errchain packages to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Logging ----

# Name of the shared logger every errchain child logger propagates to.
ERRCHAIN_LOGGER_NAME = "errchain"
# Level name for the shared logger; None defers to the caller's ``level``.
ERRCHAIN_DEFAULT_LOG_LEVEL = None
# Emit single-line JSON records by default.
ERRCHAIN_DEFAULT_LOG_JSON = True

# ---- Transport adapter ----

# Whether HTTP error bodies include nested ``cause`` objects.
ERRCHAIN_DEFAULT_EXPOSE_CAUSE = False

# ---- Environment variable names ----

ENV_LOG_LEVEL = "ERRCHAIN_LOG_LEVEL"
ENV_LOG_JSON = "ERRCHAIN_LOG_JSON"
ENV_EXPOSE_CAUSE = "ERRCHAIN_EXPOSE_CAUSE"
ENV_CONFIG_FILE = "ERRCHAIN_CONFIG_FILE"
