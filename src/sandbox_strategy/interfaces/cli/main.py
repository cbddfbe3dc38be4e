#!/usr/bin/env python3
"""
Sandbox Strategy CLI - Show the sandboxed strategy selected for a build
"""

import argparse
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from pydantic import ValidationError

from sandbox_strategy import __version__
from sandbox_strategy.application.services.strategy_provider import SandboxStrategyProvider
from sandbox_strategy.domain.errors import ConfigurationError
from sandbox_strategy.domain.value_objects import Platform
from sandbox_strategy.infrastructure.config.config import (
    SandboxOptions,
    Settings,
    build_request_config,
    get_settings,
)
from sandbox_strategy.infrastructure.logging.logging_config import configure_logging, get_logger
from sandbox_strategy.infrastructure.platform.detector import FixedPlatform, HostPlatformDetector
from sandbox_strategy.infrastructure.targets.static_resolver import StaticTargetResolver
from sandbox_strategy.infrastructure.workspace.materializer import WorkspaceFileMaterializer


EXIT_CONFIGURATION_ERROR = 2


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        prog="sandbox-strategies",
        description="Show the sandboxed execution strategy selected for this host"
    )

    # Directories
    parser.add_argument(
        "--workspace", "-w",
        type=str,
        default=".",
        help="Workspace root (default: current directory)"
    )
    parser.add_argument(
        "--output-base",
        type=str,
        required=True,
        help="Output base directory of the build"
    )

    # Sandbox options
    parser.add_argument(
        "--rootfs",
        type=str,
        help="Label of the rootfs archive or of a single-file filegroup"
    )
    parser.add_argument(
        "--rootfs-cache-path",
        type=str,
        help="Cache directory for extracted rootfs images (default: <output-base>/rootfs)"
    )
    parser.add_argument(
        "--targets",
        type=str,
        help="YAML manifest describing the targets labels resolve to"
    )

    # Request options
    parser.add_argument(
        "--test-arg",
        action="append",
        default=[],
        dest="test_arguments",
        help="Test argument of the build request (repeatable)"
    )
    parser.add_argument(
        "--verbose-failures",
        action="store_true",
        help="Report failures verbosely"
    )
    parser.add_argument(
        "--product-name",
        type=str,
        default=settings.product_name,
        help=f"Product name (default: {settings.product_name})"
    )
    parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="Override host platform detection"
    )

    # Output control
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def format_text(provider: SandboxStrategyProvider, platform: Platform) -> str:
    strategies = provider.get_strategies()
    if not strategies:
        return f"no sandboxed strategy for platform {platform.value}"

    lines = []
    for strategy in strategies:
        info = strategy.describe()
        line = f"{info['name']} ({info['platform']}) unblock_network={info['unblock_network']}"
        rootfs = info.get("rootfs")
        if rootfs:
            line += f" rootfs={rootfs['label']} archive={rootfs['archive_path']}"
        lines.append(line)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI, returning the exit status"""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    args = parse_args(argv, settings)
    configure_logging(args.log_level, settings.log_format)
    logger = get_logger(__name__)

    overrides = {}
    if args.rootfs is not None:
        overrides["rootfs"] = args.rootfs
    if args.rootfs_cache_path is not None:
        overrides["rootfs_cache_path"] = args.rootfs_cache_path

    platform_detector = FixedPlatform(Platform(args.platform)) if args.platform else HostPlatformDetector()
    platform = platform_detector.current_platform()

    with ThreadPoolExecutor(thread_name_prefix="sandbox-bg") as background_workers:
        try:
            options = SandboxOptions(**overrides)
            target_resolver = (
                StaticTargetResolver.from_yaml(args.targets) if args.targets else StaticTargetResolver()
            )
            config = build_request_config(
                options,
                workspace=args.workspace,
                output_base=args.output_base,
                test_arguments=args.test_arguments,
                verbose_failures=args.verbose_failures,
                product_name=args.product_name,
                background_workers=background_workers,
            )
            provider = SandboxStrategyProvider.create(
                config,
                platform_detector=FixedPlatform(platform),
                target_resolver=target_resolver,
                file_materializer=WorkspaceFileMaterializer(args.workspace),
            )
        except ValidationError as e:
            logger.error("Invalid sandbox options", error=str(e))
            print(f"Error: invalid sandbox options: {e}", file=sys.stderr)
            return EXIT_CONFIGURATION_ERROR
        except ConfigurationError as e:
            logger.error("Sandbox configuration error", error=e.message, **e.details)
            print(f"Error: {e.message}", file=sys.stderr)
            return EXIT_CONFIGURATION_ERROR

    if args.format == "json":
        print(json.dumps([s.describe() for s in provider.get_strategies()], indent=2))
    else:
        print(format_text(provider, platform))
    return 0


def entry_point():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
