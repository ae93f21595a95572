"""Command-line front end for the transcript form."""

import asyncio
import sys

from .api_client import TranscriptApiClient
from .config import load_client_config
from .controller import TranscriptFormController
from .storage import JsonFileResultStore


def render(controller: TranscriptFormController) -> str:
    """Format the controller's result view as plain text."""
    result = controller.result
    lines = [
        f"Duration: {result.duration} | Language: {result.language} | "
        f"Confidence: {result.confidence} | Words: {controller.word_count}",
        "",
        result.text,
    ]
    if controller.is_copied:
        lines.append("")
        lines.append("(copied to clipboard)")
    return "\n".join(lines)


async def run(url: str | None, backend_url: str, copy: bool, clear: bool, save: bool) -> int:
    config = load_client_config()
    api = TranscriptApiClient(backend_url or config.backend_url)
    store = JsonFileResultStore(config.data_dir) if save else None
    controller = TranscriptFormController(
        api, store=store, copied_reset_delay=config.copied_reset_delay
    )

    try:
        if clear:
            controller.clear()
            if not url:
                return 0

        if url is None:
            if controller.result is None:
                print("No saved transcript.", file=sys.stderr)
                return 1
        else:
            controller.url = url
            await controller.submit()

        if controller.error:
            print(f"Error: {controller.error}", file=sys.stderr)
            return 1

        if copy:
            await controller.copy()
            if controller.error:
                print(f"Error: {controller.error}", file=sys.stderr)

        print(render(controller))
        return 0
    finally:
        await api.close()


def main():
    """CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Extract the transcript of a YouTube video")
    parser.add_argument("url", nargs="?", help="YouTube URL (omit to show the saved transcript)")
    parser.add_argument("--backend", default="", help="Backend base URL")
    parser.add_argument("--copy", action="store_true", help="Copy the transcript to the clipboard")
    parser.add_argument("--clear", action="store_true", help="Forget the saved transcript")
    parser.add_argument("--no-save", action="store_true", help="Do not read or write the saved transcript")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.url, args.backend, args.copy, args.clear, not args.no_save)))


if __name__ == "__main__":
    main()
