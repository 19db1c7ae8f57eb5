"""Command-line front end: generate marketing content through the relay."""
from __future__ import annotations
import argparse
import logging
import shutil
import subprocess
import sys

from marketai.client.preferences import DEFAULT_PATH, load_preferences, save_preferences
from marketai.client.relay_client import DEFAULT_RELAY_URL, ContentClient
from marketai.client.session import ContentSession
from marketai.common.logging_setup import setup_logging
from marketai.common.schema import (
    Category,
    EmptyDescriptionError,
    GenerationError,
    GenerationRequest,
)

LOGGER = logging.getLogger("marketai.client.cli")

THEMES = ("dark", "light")

CLIPBOARD_COMMANDS = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


def system_clipboard(text: str) -> None:
    """Write text to the first clipboard tool found on PATH."""
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            subprocess.run(cmd, input=text.encode("utf-8"), check=True)
            return
    raise GenerationError("Failed to copy content: no clipboard tool found")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate marketing content with OpenAI")
    ap.add_argument(
        "--category",
        default=Category.SLOGAN.value,
        choices=[c.value for c in Category],
        help="Kind of content to generate",
    )
    ap.add_argument("--description", help="Product or service description")
    ap.add_argument("--relay-url", default=DEFAULT_RELAY_URL, help="Relay base URL")
    ap.add_argument("--prefs", default=str(DEFAULT_PATH), help="Preferences file")
    ap.add_argument("--set-key", metavar="KEY", help="Save a personal OpenAI key and exit")
    ap.add_argument("--theme", choices=THEMES, help="Save the theme preference and exit")
    ap.add_argument("--copy", action="store_true", help="Copy the result to the clipboard")
    return ap


def main(argv: list[str] | None = None) -> int:
    setup_logging(logging.WARNING)
    args = build_parser().parse_args(argv)
    prefs = load_preferences(args.prefs)

    if args.set_key is not None or args.theme is not None:
        if args.set_key is not None:
            prefs.api_key = args.set_key or None
            print("API Key saved successfully!")
        if args.theme is not None:
            prefs.theme = args.theme
            print(f"Theme set to {args.theme}.")
        save_preferences(prefs, args.prefs)
        return 0

    try:
        request = GenerationRequest(args.category, args.description or "")
        with ContentClient(args.relay_url, api_key=prefs.override_key) as client:
            session = ContentSession(client)
            content = session.generate(request)
            print(content)
            if args.copy:
                session.copy(system_clipboard)
                print("Content copied to clipboard!", file=sys.stderr)
    except (EmptyDescriptionError, GenerationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except subprocess.CalledProcessError as e:
        LOGGER.error("Clipboard command failed: %s", e)
        print("Failed to copy content", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
