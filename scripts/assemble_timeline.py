#!/usr/bin/env python3
"""Plan a timeline from a JSON request body and print the response envelope."""

import argparse
import json
import sys
from pathlib import Path

from property_reel.config import settings
from property_reel.tools.assembler import assemble
from property_reel.utils.logging_config import configure_logging
from property_reel.web.request_body import normalize_body


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Assemble a property walkthrough timeline from a request body"
    )
    parser.add_argument("input", type=Path, help="JSON file with a nested or flat request body")
    parser.add_argument("--output", "-o", type=Path, help="Write the response here instead of stdout")
    parser.add_argument(
        "--eps",
        type=float,
        default=settings.validation_eps_seconds,
        help=f"Validation tolerance in seconds (default: {settings.validation_eps_seconds})"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_logging("DEBUG" if args.debug else settings.log_level)

    try:
        body = json.loads(args.input.read_text())
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Could not read {args.input}: {e}", file=sys.stderr)
        return 1

    run_settings = settings.model_copy(update={"validation_eps_seconds": args.eps})
    result = assemble(normalize_body(body), run_settings)
    response = json.dumps(result.to_response(), indent=2)

    if args.output:
        args.output.write_text(response + "\n")
        print(f"{'✅' if result.ok else '❌'} status {result.status}, written to {args.output}")
    else:
        print(response)

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
