"""Built-in defaults for abortable future settings.

Values here are the last fallback; environment variables parsed by
``abortable_futures.config.get_abortable_config`` take precedence.
"""

DEFAULT_ABORT_POLICY = "rerun"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_JSON = True
BASE_LOGGER_NAME = "abortable"

ENV_ABORT_POLICY = "ABORTABLE_ABORT_POLICY"
ENV_LOG_LEVEL = "ABORTABLE_LOG_LEVEL"
ENV_LOG_JSON = "ABORTABLE_LOG_JSON"

__all__ = [
    "DEFAULT_ABORT_POLICY",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
    "BASE_LOGGER_NAME",
    "ENV_ABORT_POLICY",
    "ENV_LOG_LEVEL",
    "ENV_LOG_JSON",
]
