"""CLI entry point — render an imitation prompt or ask Claude for a reply.

Usage:
  python cli.py prompt examples.json               # Print the prompt
  python cli.py reply examples.json                # Ask Claude for a reply
  python cli.py reply examples.json --name Dave    # Override the assistant name

The JSON file looks like:
  {
    "name": "Dave",
    "style_context": [{"messages": [{"speaker_id": 0, "text": "omg heyyyyyyy!"}, ...]}],
    "conversation_context": {"messages": [{"speaker_id": 0, "text": "..."}, ...]}
  }
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import anthropic
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from config.settings import Settings
from conversation.errors import ImitatorError
from conversation.imitator import Imitator

console = Console()


def load_imitator(path: str, settings: Settings, api_key: str | None = None,
                  name: str | None = None) -> Imitator:
    """Build an Imitator from a JSON context file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    imitator = Imitator.from_dict(data, api_key=api_key, settings=settings)
    if name:
        imitator.name = name
    return imitator


async def cmd_prompt(args, settings: Settings) -> None:
    """Print the rendered prompt."""
    imitator = load_imitator(args.file, settings, name=args.name)
    # Plain print keeps the prompt copy-pasteable
    print(imitator.render_prompt(), end="")


async def cmd_reply(args, settings: Settings) -> None:
    """Generate a reply with Claude."""
    if not settings.ANTHROPIC_API_KEY:
        raise ImitatorError(
            "ANTHROPIC_API_KEY not found in .env file. "
            "Please create a .env file: ANTHROPIC_API_KEY=sk-..."
        )

    imitator = load_imitator(
        args.file, settings, api_key=settings.ANTHROPIC_API_KEY, name=args.name,
    )
    with console.status("Asking Claude..."):
        reply = await imitator.generate_reply()

    title = imitator.name or "Reply"
    console.print(Panel(escape(reply), title=escape(title), border_style="green"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ImitatorAI CLI",
        prog="python cli.py",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # prompt
    p_prompt = subparsers.add_parser("prompt", help="Print the imitation prompt")
    p_prompt.add_argument("file", help="JSON context file")
    p_prompt.add_argument("--name", help="Assistant name (overrides the file)")

    # reply
    p_reply = subparsers.add_parser("reply", help="Generate a reply with Claude")
    p_reply.add_argument("file", help="JSON context file")
    p_reply.add_argument("--name", help="Assistant name (overrides the file)")

    return parser


def main(argv: list[str] | None = None) -> int:
    Path("data").mkdir(exist_ok=True)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[
            logging.FileHandler("data/imitator.log", encoding="utf-8"),
        ],
    )
    # Claude API calls at DEBUG level
    logging.getLogger("conversation.reply_service").setLevel(logging.DEBUG)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    cmd_map = {
        "prompt": cmd_prompt,
        "reply": cmd_reply,
    }

    try:
        settings = Settings()
    except ValidationError as e:
        console.print(f"[red]Invalid settings in environment or .env:[/]\n{escape(str(e))}")
        return 1

    try:
        asyncio.run(cmd_map[args.command](args, settings))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read {args.file}: {escape(str(e))}[/]")
        return 1
    except ValidationError as e:
        console.print(f"[red]Invalid context file {args.file}:[/]\n{escape(str(e))}")
        return 1
    except (ImitatorError, anthropic.APIError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
