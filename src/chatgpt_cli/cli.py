"""Command-line entry point: ``chatgpt-cli -c "your request here"``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from chatgpt_cli._client import ChatClient
from chatgpt_cli._config import DEFAULT_ENV_FILE, DEFAULT_MODEL, load_config
from chatgpt_cli._exceptions import APIError, ChatError, DecodeError

logger = logging.getLogger(__name__)

RESPONSE_LABEL = "Response from ChatGPT:"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chatgpt-cli",
        description="Send one prompt to the OpenAI Chat Completions API and print the reply.",
    )
    parser.add_argument("-c", "--content", default="", help="Content for the request")
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Settings file to load before reading the environment (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.content:
        parser.error(
            "No content provided. Use -c flag to specify the content, "
            'e.g., chatgpt-cli -c "your request here"'
        )
    _configure_logging(args.verbose)

    try:
        config = load_config(args.env_file)
        print(f"Got API key {config.masked_key} from {config.key_source}")
        if config.model_is_default:
            print(
                f"Using default model: {DEFAULT_MODEL} "
                "(no model found in .env file or environment variable)"
            )
        else:
            print(f"Using model: {config.model}")

        completion = ChatClient(config).chat(args.content)
    except APIError as exc:
        logger.error("API returned an error: %s\nResponse: %s", exc.status, exc.body)
        return 1
    except DecodeError as exc:
        logger.error("%s: %s", exc, exc.body)
        return 1
    except ChatError as exc:
        logger.error("%s", exc)
        return 1

    print(f"{RESPONSE_LABEL}\n{completion.text}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
