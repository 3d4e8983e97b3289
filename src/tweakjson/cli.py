"""
Command line entry point for tweakjson.

Loads the build snapshot and configuration, runs the manifest assembler and
maps its outcome to an exit status.
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from tweakjson.build_models import BuildSnapshot
from tweakjson.manifest_assembler import ManifestAssembler
from tweakjson.repository_probe import ArtifactUrlResolver
from tweakjson.tweakjson_config import DEFAULT_CONFIG_FILE, TweakjsonConfig
from tweakjson.tweakjson_exceptions import TweakjsonException
from tweakjson.tweakjson_logger import TweakjsonLogger

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tweakjson",
        description="Generate a launcher version manifest from an exported build snapshot.",
    )
    parser.add_argument("snapshot", help="Path to the build snapshot JSON exported by the build")
    parser.add_argument(
        "--config",
        default=None,
        help=f"tweakjson TOML configuration (default: ./{DEFAULT_CONFIG_FILE} if present)",
    )
    parser.add_argument("--minecraft-version", default=None, help="Target game version")
    parser.add_argument("--output", default=None, help="Where to write the manifest")
    parser.add_argument("--source-set", default=None, help="Source set whose runtime classpath is used")
    parser.add_argument(
        "--probe-timeout", type=float, default=None, help="Timeout in seconds for each repository request"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the manifest to stdout instead of writing it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-artifact details")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> TweakjsonConfig:
    """
    Build the effective configuration: TOML file first, command line overrides on top.

    Raises:
        ConfigurationException: If the configuration file or an override is invalid
    """
    config_path = args.config
    if config_path is None and os.path.exists(DEFAULT_CONFIG_FILE):
        config_path = DEFAULT_CONFIG_FILE

    config = TweakjsonConfig.from_toml(config_path) if config_path else TweakjsonConfig()
    return config.with_overrides(
        minecraft_version=args.minecraft_version,
        output_path=args.output,
        source_set=args.source_set,
        probe_timeout=args.probe_timeout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger = TweakjsonLogger()

    try:
        config = load_config(args)
        snapshot = BuildSnapshot.from_file(args.snapshot)
        with ArtifactUrlResolver(
            snapshot.repositories, logger, timeout=config.probe_timeout
        ) as resolver:
            assembler = ManifestAssembler(snapshot, config, logger, url_resolver=resolver)
            if args.dry_run:
                manifest = assembler.build()
                print(json.dumps(manifest.to_launcher_dict(), indent=2))
                return EXIT_OK
            outcome = assembler.run()
    except TweakjsonException as e:
        logger.log(e.message, logging.ERROR)
        return EXIT_ERROR

    if not outcome.succeeded():
        return EXIT_WRITE_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
