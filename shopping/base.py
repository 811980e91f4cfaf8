"""
BaseSample — abstract base class for all Content API sample programs.

Provides:
  - CLI parsing: -c/--config_path, -h/--help, --debug, plus per-sample flags
  - Config directory check and merchant-info.json loading before any auth
  - Rotating file logger + stderr handler, scoped to <content_dir>/logs/<sample>.log
  - main() classmethod: builds the sample, runs it, reports 4xx API errors
  - Automatic elapsed-time logging

Subclass usage:
    class MySample(BaseSample):
        def run(self) -> None:
            self.logger.info("doing work...")
            print("- result")

    if __name__ == "__main__":
        MySample.main()
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from abc import ABC, abstractmethod
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Sequence

from googleapiclient.errors import HttpError

from .config import (
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    SampleConfig,
    load_config,
    resolve_config_dir,
)
from .errors import check_http_error

# Library modules log under "shopping.*"; handlers are attached here so their
# records land in the same file as the sample's own.
PACKAGE_LOGGER = "shopping"
LOGS_SUBDIR = "logs"


class BaseSample(ABC):
    """Abstract base for all sample programs."""

    def __init__(
        self,
        config_path: str | Path = DEFAULT_CONFIG_PATH,
        log_level: int = logging.INFO,
    ) -> None:
        # Derive sample name from the concrete class name (lowercased)
        self.sample_name: str = type(self).__name__.lower()
        self.content_dir: Path = resolve_config_dir(config_path)
        self.logger: logging.Logger = self._setup_logger(log_level)
        self.config: SampleConfig = load_config(self.content_dir)

    # ── Logging ───────────────────────────────────────────────────────────────

    def _setup_logger(self, log_level: int) -> logging.Logger:
        """
        Configure the package logger to write to both:
          - <content_dir>/logs/<sample_name>.log  (rotating, max 2 MB × 5 backups)
          - stderr (stdout is reserved for sample output)
        """
        logs_dir = self.content_dir / LOGS_SUBDIR
        logs_dir.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger(PACKAGE_LOGGER)
        root.setLevel(log_level)

        # One sample per process; replace handlers left by an earlier instance
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        fmt = logging.Formatter(
            "%(asctime)s [%(levelname)-8s] %(name)s — %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        file_handler = RotatingFileHandler(
            logs_dir / f"{self.sample_name}.log",
            maxBytes=2_000_000,   # 2 MB per file
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(fmt)

        root.addHandler(file_handler)
        root.addHandler(stream_handler)
        return logging.getLogger(f"{PACKAGE_LOGGER}.{self.sample_name}")

    # ── Abstract interface ────────────────────────────────────────────────────

    @abstractmethod
    def run(self) -> None:
        """Execute the sample, printing human-readable results to stdout."""

    def execute(self) -> None:
        """Run the sample, reporting structured 4xx API errors instead of raising."""
        try:
            self.run()
        except HttpError as exc:
            check_http_error(exc)

    # ── CLI ───────────────────────────────────────────────────────────────────

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Hook for subclasses to register their own flags."""

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        doc = (cls.__doc__ or cls.__name__).strip().splitlines()[0]
        parser = argparse.ArgumentParser(description=doc)
        parser.add_argument(
            "-c", "--config_path", metavar="PATH", default=DEFAULT_CONFIG_PATH,
            help=f"Configuration directory for the samples (default: {DEFAULT_CONFIG_PATH})",
        )
        parser.add_argument(
            "--debug", action="store_true", help="Enable DEBUG-level logging"
        )
        cls.add_arguments(parser)
        return parser

    @classmethod
    def from_args(cls, args: argparse.Namespace, log_level: int) -> "BaseSample":
        """Construct the sample from parsed flags. Subclasses read their own flags here."""
        return cls(config_path=args.config_path, log_level=log_level)

    @classmethod
    def main(cls, argv: Optional[Sequence[str]] = None) -> None:
        """
        Standard CLI entrypoint. Wire up as:
            if __name__ == "__main__":
                MySample.main()

        -h prints usage and exits 0 (argparse). Configuration errors are
        printed and exit 1; any other failure is logged and re-raised.
        """
        parser = cls.build_parser()
        args = parser.parse_args(argv)
        log_level = logging.DEBUG if args.debug else logging.INFO

        try:
            sample = cls.from_args(args, log_level)
        except ConfigurationError as exc:
            print(f"Configuration error: {exc}", file=sys.stderr)
            sys.exit(1)

        t0 = time.monotonic()
        try:
            sample.execute()
        except ConfigurationError as exc:
            sample.logger.error("%s", exc)
            print(f"Configuration error: {exc}", file=sys.stderr)
            sys.exit(1)
        except Exception:
            elapsed = time.monotonic() - t0
            sample.logger.exception("Sample failed after %.2fs", elapsed)
            raise
        elapsed = time.monotonic() - t0
        sample.logger.info("Completed in %.2fs", elapsed)
