"""
Command-line interface and entry points for objectwriter.

Running without a subcommand writes the default records (1-integers.obj,
2-string.obj, 3-date.obj) to the current working directory.
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from objectwriter.core.exceptions import ConfigError, ObjectWriterException
from objectwriter.core.logger import get_logger
from objectwriter.generator import ObjectGenerator
from objectwriter.models.generator_config import GeneratorConfig
from objectwriter.reader import read_objects

logger = get_logger(__name__)


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load a JSON or YAML generator config into a dict."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        if config_file.suffix == ".json":
            try:
                config = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
        elif config_file.suffix in (".yaml", ".yml"):
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
        else:
            raise ConfigError(
                f"Unsupported config format: {config_file.suffix}. Use .json or .yaml"
            )

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(config).__name__}")
    return config


def main(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    *,
    failure_scope: Optional[str] = None,
    run_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Main entry point for object generation.

    Can be called with either a config file path (JSON/YAML), a config
    dictionary, or neither for the default three-record plan.

    Args:
        config_path: Path to JSON/YAML configuration file
        config_dict: Direct configuration dictionary
        failure_scope: Overrides the config's failure_scope
        run_id: Identifier attached to log lines; generated when omitted

    Returns:
        Run report (see ObjectGenerator.run)

    Raises:
        ConfigError: If the config file is missing or unreadable
        ValidationError: If the configuration is invalid

    Example:
        >>> from objectwriter.cli import main
        >>> result = main()
        >>> print(f"Status: {result['status']}")
    """
    if config_dict is not None:
        config = dict(config_dict)
        logger.debug("Using provided config dictionary")
    elif config_path:
        config = load_config_file(config_path)
        logger.info(f"Loaded config from {config_path}")
    else:
        config = {}

    if failure_scope is not None:
        config["failure_scope"] = failure_scope

    cfg = GeneratorConfig.model_validate(config)
    return ObjectGenerator(run_id=run_id).run(cfg)


def validate_config(config_path: str) -> bool:
    """
    Validate a configuration file without writing anything.

    Raises:
        ConfigError: If the file is missing or unreadable
        ValidationError: If the configuration is invalid
    """
    config = load_config_file(config_path)
    logger.info(f"Validating config: {config_path}")
    GeneratorConfig.model_validate(config)
    logger.info("Configuration is valid")
    return True


def _format_value(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return repr(value)


def dump_files(paths: List[str]) -> None:
    """Print every value of each object file, one per line."""
    for path in paths:
        values = read_objects(path)
        print(f"{path}: {len(values)} value(s)")
        for value in values:
            print(f"  {type(value).__name__}: {_format_value(value)}")


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Command-line interface for objectwriter.

    Supports subcommands:
    - run: Write the configured object files (default when no subcommand)
    - validate: Validate a configuration
    - read: Decode object files and print their values

    Usage:
        objectwriter
        objectwriter run --config plan.yaml --failure-scope shared
        objectwriter validate plan.json
        objectwriter read 1-integers.obj 2-string.obj
    """
    parser = argparse.ArgumentParser(
        prog="objectwriter",
        description="Write primitive values to self-describing binary object files"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Write the object files"
    )
    run_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file (JSON or YAML)"
    )
    run_parser.add_argument(
        "--failure-scope",
        choices=["per_record", "shared"],
        help="Whether one failed write skips the remaining ones"
    )
    run_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate configuration without writing files"
    )
    validate_parser.add_argument(
        "config",
        help="Path to configuration file (JSON or YAML)"
    )

    read_parser = subparsers.add_parser(
        "read",
        help="Decode object files and print their values"
    )
    read_parser.add_argument(
        "files",
        nargs="+",
        help="Object files to decode"
    )

    args = parser.parse_args(argv)

    if args.command in (None, "run"):
        config_path = getattr(args, "config", None)
        try:
            config = load_config_file(config_path) if config_path else {}
            if getattr(args, "verbose", False):
                config["log_level"] = "DEBUG"
            main(config_dict=config, failure_scope=getattr(args, "failure_scope", None))
        except Exception as e:
            logger.error(f"Run failed: {e}")
            sys.exit(1)
        # Failed writes were already reported; they do not change the exit code.
        sys.exit(0)

    elif args.command == "validate":
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)

    elif args.command == "read":
        try:
            dump_files(args.files)
            sys.exit(0)
        except ObjectWriterException as e:
            print(str(e))
            sys.exit(1)


if __name__ == "__main__":
    cli()
