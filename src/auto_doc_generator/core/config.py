"""Configuration management for auto-doc-generator."""

import argparse
import os
import sys
from typing import Dict, List, Optional, Union

import yaml

from auto_doc_generator.constants import FileDefaults, LanguageIds
from auto_doc_generator.core.exceptions import ConfigurationError
from auto_doc_generator.core.logging import configure_logging, get_logger
from auto_doc_generator.models.config import AutoDocConfig
from auto_doc_generator.models.documentation import LanguageFamily

# Global variable for config path (set by parse_args_and_get_config / load_config)
CONFIG_PATH: Optional[str] = None

# Entries from the config file, layered over the built-in maps
CUSTOM_EXTENSIONS: Dict[str, str] = {}
CUSTOM_LANGUAGES: Dict[str, str] = {}

_BUILTIN_LANGUAGES: Dict[str, LanguageFamily] = {
    LanguageIds.PYTHON: LanguageFamily.PYTHON,
    LanguageIds.JAVASCRIPT: LanguageFamily.JAVASCRIPT,
    LanguageIds.TYPESCRIPT: LanguageFamily.JAVASCRIPT,
    LanguageIds.JAVASCRIPT_REACT: LanguageFamily.JAVASCRIPT,
    LanguageIds.TYPESCRIPT_REACT: LanguageFamily.JAVASCRIPT,
}


def validate_config_file(config_path: str) -> AutoDocConfig:
    """Validate the YAML configuration file structure.

    Args:
        config_path: Path to the YAML config file

    Returns:
        Validated AutoDocConfig model

    Raises:
        ConfigurationError: If config file is invalid
    """
    if not os.path.exists(config_path):
        raise ConfigurationError(config_path, "File does not exist")

    if not os.path.isfile(config_path):
        raise ConfigurationError(config_path, "Path is not a file")

    try:
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(config_path, f"YAML parsing failed: {e}") from e
    except OSError as e:
        raise ConfigurationError(config_path, f"Failed to read file: {e}") from e

    if config_data is None:
        raise ConfigurationError(config_path, "Config file is empty")

    if not isinstance(config_data, dict):
        raise ConfigurationError(config_path, "Config must be a YAML dictionary")

    try:
        return AutoDocConfig(**config_data)
    except Exception as e:
        raise ConfigurationError(config_path, f"Validation failed: {e}") from e


def load_config(config_path: Optional[str]) -> Optional[AutoDocConfig]:
    """Validate a config file and install its maps as the active configuration.

    Passing None resets to the built-in defaults.

    Raises:
        ConfigurationError: If config file is invalid
    """
    global CONFIG_PATH, CUSTOM_EXTENSIONS, CUSTOM_LANGUAGES

    if config_path is None:
        CONFIG_PATH = None
        CUSTOM_EXTENSIONS = {}
        CUSTOM_LANGUAGES = {}
        return None

    config = validate_config_file(config_path)
    CONFIG_PATH = config_path
    CUSTOM_EXTENSIONS = dict(config.extensions or {})
    CUSTOM_LANGUAGES = dict(config.languages or {})

    get_logger("config").info(
        "config_loaded",
        config_path=config_path,
        extensions=len(CUSTOM_EXTENSIONS),
        languages=len(CUSTOM_LANGUAGES),
    )
    return config


def resolve_language_family(language: Union[str, LanguageFamily, None]) -> Optional[LanguageFamily]:
    """Map a language id (or family) to its language family.

    Returns:
        The family, or None when the language is not supported
    """
    if isinstance(language, LanguageFamily):
        return language
    if not language:
        return None

    key = language.lower()
    if key in CUSTOM_LANGUAGES:
        return LanguageFamily(CUSTOM_LANGUAGES[key])
    return _BUILTIN_LANGUAGES.get(key)


def detect_language(file_path: str) -> Optional[str]:
    """Guess the language id of a file from its extension."""
    _, ext = os.path.splitext(file_path)
    ext = ext.lower()
    if ext in CUSTOM_EXTENSIONS:
        return CUSTOM_EXTENSIONS[ext]
    return FileDefaults.EXTENSIONS.get(ext)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the --config/--log-level/--log-file options shared by every entry point."""
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to a YAML config file with extra extension and language mappings",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also be set via LOG_LEVEL env var. Default: INFO",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to log file (logs to stderr by default). Can also be set via LOG_FILE env var.",
    )


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the MCP server.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="auto-doc-mcp",
        description="auto-doc-generator MCP Server - Inserts docstring/JSDoc templates above undocumented declarations",
        epilog="""
environment variables:
  AUTO_DOC_CONFIG    Path to YAML config file (overridden by --config flag)
  LOG_LEVEL          Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_FILE           Path to log file (logs to stderr by default)
  SENTRY_DSN         Enables Sentry error tracking when set
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_common_arguments(parser)
    return parser


def _resolve_and_validate_config_path(args: argparse.Namespace) -> Optional[str]:
    """Resolve and load the config file from args or environment.

    Precedence: --config flag > AUTO_DOC_CONFIG env > None

    Args:
        args: Parsed command-line arguments.

    Returns:
        Path to config file or None if not specified.

    Note:
        Calls sys.exit(1) if validation fails.
    """
    config_path = args.config or os.environ.get("AUTO_DOC_CONFIG") or None

    try:
        load_config(config_path)
    except ConfigurationError as e:
        logger = get_logger("config")
        logger.error("config_validation_failed", config_path=config_path, error=str(e))
        sys.exit(1)

    return config_path


def _configure_logging_from_args(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments and environment.

    Precedence: --log-level/--log-file flags > env vars > defaults
    """
    log_level = args.log_level or os.environ.get("LOG_LEVEL", "INFO")
    log_file = args.log_file or os.environ.get("LOG_FILE")
    configure_logging(log_level=log_level, log_file=log_file)


def apply_common_arguments(args: argparse.Namespace) -> Optional[str]:
    """Configure logging, then load the config file named by args or environment.

    Returns:
        The active config path, if any
    """
    _configure_logging_from_args(args)
    return _resolve_and_validate_config_path(args)


def parse_args_and_get_config(argv: Optional[List[str]] = None) -> None:
    """Parse command-line arguments and determine config path."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    apply_common_arguments(args)
