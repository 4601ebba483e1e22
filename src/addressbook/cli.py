"""
Command line front end.

Reads commands line by line, runs them through ``LogicManager`` and prints
the feedback. Commands given with ``--command`` run without a prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from src.addressbook.common.exceptions import AddressBookError, ConfigurationError
from src.addressbook.common.logging_utils import (
    configure_logging_with_environment_tagging,
)
from src.addressbook.config.app_config import AppConfig, LogLevel, load_config
from src.addressbook.domain.address_book import AddressBook
from src.addressbook.domain.sample_data import get_sample_address_book
from src.addressbook.services.logic_manager import LogicManager
from src.addressbook.services.model_manager import ModelManager

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Manage the students, teachers and meetings of a class"
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        metavar="PATH",
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--no-sample-data",
        dest="load_sample_data",
        action="store_false",
        default=None,
        help="Start with an empty address book",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="COMMAND",
        help="Run this command instead of reading from stdin (repeatable)",
    )
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_cli_parser()
    return parser.parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load the configuration and apply command line overrides to it."""
    cfg = load_config(args.config_file)

    if args.log_level is not None:
        cfg.logging.level = LogLevel(args.log_level)
    if args.log_file is not None:
        cfg.logging.log_file = args.log_file
    if args.load_sample_data is not None:
        cfg.load_sample_data = args.load_sample_data
    return cfg


def _configure_logging(cfg: AppConfig) -> None:
    """Configure logging based on configuration."""
    configure_logging_with_environment_tagging(
        level=getattr(logging, cfg.logging.level.value),
        log_file=cfg.logging.log_file,
    )


def build_logic(cfg: AppConfig) -> LogicManager:
    initial = get_sample_address_book() if cfg.load_sample_data else AddressBook()
    return LogicManager(ModelManager(initial))


def run_commands(
    logic: LogicManager,
    lines: Iterable[str],
    out: TextIO,
    prompt: str = "",
) -> int:
    """
    Execute each line and print its feedback to ``out``.

    Stops after an ``exit`` command or when ``lines`` is exhausted.

    Returns:
        The number of commands that failed
    """
    failures = 0
    if prompt:
        out.write(prompt)
        out.flush()
    for line in lines:
        if line.strip():
            try:
                result = logic.execute(line)
            except AddressBookError as exc:
                failures += 1
                out.write(f"{exc.message}\n")
            else:
                out.write(f"{result.message}\n")
                if result.show_help:
                    out.write("\n\n".join(logic.get_command_usages()) + "\n")
                if result.exit:
                    break
        if prompt:
            out.write(prompt)
            out.flush()
    return failures


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns a process exit code."""
    args = parse_cli_args(argv)
    try:
        cfg = apply_cli_args(args)
    except ConfigurationError as exc:
        sys.stderr.write(f"ERROR: {exc.message}\n")
        return 2

    _configure_logging(cfg)
    logic = build_logic(cfg)
    logger.debug("Loaded %d persons", len(logic.get_filtered_person_list()))

    if args.commands:
        failures = run_commands(logic, args.commands, sys.stdout)
        return 1 if failures else 0

    prompt = cfg.prompt if sys.stdin.isatty() else ""
    run_commands(logic, sys.stdin, sys.stdout, prompt=prompt)
    return 0
