#!/usr/bin/env python
"""CLI for the Text API client."""

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Literal

import httpx
from pydantic import BaseModel, field_validator

from textapi import (
    AspectBasedSentimentParams,
    ElsaParams,
    ExtractParams,
    SentimentParams,
    TextAPIClient,
    create_client,
    load_config,
)
from textapi.config import get_default_config_path

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["elsa", "extract", "sentiment", "absa"]
    config: Path
    text: str = ""
    url: str = ""
    html: str = ""
    mode: str = ""
    domain: str = ""
    best_image: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def dispatch(client: TextAPIClient, args: CLIArgs) -> Any:
    """Run the operation named by ``args.command``."""
    if args.command == "elsa":
        return await client.elsa(ElsaParams(text=args.text, url=args.url))
    if args.command == "extract":
        return await client.extract(
            ExtractParams(url=args.url, html=args.html, best_image=args.best_image)
        )
    if args.command == "sentiment":
        return await client.sentiment(SentimentParams(text=args.text, url=args.url, mode=args.mode))
    return await client.aspect_based_sentiment(
        AspectBasedSentimentParams(text=args.text, url=args.url, domain=args.domain)
    )


async def run(args: CLIArgs) -> None:
    """Execute one operation with the given configuration and print the result.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level)
    client = create_client(config)

    logger.info("Running %s", args.command)
    result = await dispatch(client, args)
    print(json.dumps(dataclasses.asdict(result), indent=2, default=str))


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Analyze text with the Text API.")
    parser.add_argument(
        "command",
        choices=["elsa", "extract", "sentiment", "absa"],
        help="Operation to run",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="",
        help="Text to analyze",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument("--url", default="", help="URL of the document to analyze")
    parser.add_argument("--html", default="", help="Raw HTML to extract from (extract only)")
    parser.add_argument("--mode", default="", help="Sentiment mode: tweet or document")
    parser.add_argument("--domain", default="", help="Review domain (absa only)")
    parser.add_argument(
        "--best-image",
        action="store_true",
        default=False,
        help="Extract the best image of the article (extract only)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            text=ns.text,
            url=ns.url,
            html=ns.html,
            mode=ns.mode,
            domain=ns.domain,
            best_image=ns.best_image,
        )
    except Exception as e:
        logger.error("%s", e)
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (ValueError, httpx.HTTPError) as e:
        logger.error("%s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
