"""
Command Line Interface
======================

Generate render-kit documentation from a YAML/JSON Config Tree document.
Command-line options override the RENDERKITDOC_* environment settings.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from renderkitdoc.config.logging import get_logger, setup_logging
from renderkitdoc.config.settings import Settings
from renderkitdoc.core.exceptions import ConfigTreeLoadError, RenderKitDocError
from renderkitdoc.core.generator import RenderKitDocGenerator
from renderkitdoc.core.loader import load_or_raise
from renderkitdoc.core.output import directory_asset_source
from renderkitdoc.models.schemas import RunConfig

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_GENERATION_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renderkitdoc", description="Generate HTML documentation for a render-kit"
    )
    parser.add_argument("--config", required=True, help="YAML or JSON Config Tree document")
    parser.add_argument("--render-kit-id", help="Render-kit to document")
    parser.add_argument("--output-directory", help="Directory receiving the renderkitdoc tree")
    parser.add_argument("--impl-version", help="Version shown next to the render-kit title")
    parser.add_argument("--locale-country", help="Country code used to pick localized descriptions")
    parser.add_argument("--asset-directory", help="Directory overriding the packaged static assets")
    parser.add_argument("--log-level", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the documentation generator."""
    args = build_parser().parse_args(argv)

    overrides = {
        "render_kit_id": args.render_kit_id,
        "output_directory": args.output_directory,
        "impl_version_number": args.impl_version,
        "locale_country_code": args.locale_country,
        "asset_directory": args.asset_directory,
        "log_level": args.log_level,
    }
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    setup_logging(settings)
    logger = get_logger("renderkitdoc.cli")

    config_path = Path(args.config)
    logger.info(f"Generating RenderKitDoc for config file: {config_path}")
    logger.info(f"Output directory: {settings.output_directory / 'renderkitdoc'}")

    try:
        config = load_or_raise(config_path)
    except ConfigTreeLoadError as e:
        logger.error(str(e), errors=e.errors)
        return EXIT_LOAD_FAILED

    asset_source = (
        directory_asset_source(settings.asset_directory) if settings.asset_directory else None
    )
    generator = RenderKitDocGenerator(
        settings.output_directory,
        settings.render_kit_id,
        RunConfig.from_settings(settings),
        asset_source,
    )
    try:
        touched = generator.generate_html_docs(config)
    except RenderKitDocError as e:
        logger.error("Generation failed", error=str(e))
        return EXIT_GENERATION_FAILED

    for touched_file in touched:
        logger.info(f"Refreshing: {touched_file.path}")

    return EXIT_OK


if __name__ == "__main__":
    exit(main())
