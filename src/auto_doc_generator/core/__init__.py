"""Core infrastructure for auto-doc-generator."""

from auto_doc_generator.core.config import (
    add_common_arguments,
    apply_common_arguments,
    detect_language,
    load_config,
    parse_args_and_get_config,
    resolve_language_family,
    validate_config_file,
)
from auto_doc_generator.core.exceptions import (
    AutoDocError,
    ConfigurationError,
    EditApplicationError,
    NoActiveFileError,
    UnsupportedLanguageError,
)
from auto_doc_generator.core.logging import (
    close_log_file,
    configure_logging,
    get_logger,
)
from auto_doc_generator.core.sentry import (
    init_sentry,
)

__all__ = [
    # Exceptions
    "AutoDocError",
    "NoActiveFileError",
    "UnsupportedLanguageError",
    "EditApplicationError",
    "ConfigurationError",
    # Logging
    "close_log_file",
    "configure_logging",
    "get_logger",
    # Config
    "add_common_arguments",
    "apply_common_arguments",
    "detect_language",
    "load_config",
    "parse_args_and_get_config",
    "resolve_language_family",
    "validate_config_file",
    # Sentry
    "init_sentry",
]
