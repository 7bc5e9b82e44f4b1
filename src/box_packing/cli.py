from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from box_packing.config import configure_logging, get_host, get_log_level, get_port
from box_packing.io.mapping import process_request
from box_packing.io.schemas import ProcessOrdersRequestSchema
from box_packing.packing.engine import PackingEngine

logger = logging.getLogger(__name__)


def load_input(path: Path) -> ProcessOrdersRequestSchema:
    """Read a request JSON file ({"pedidos": [...]}) and validate it."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return ProcessOrdersRequestSchema.model_validate(data)


def write_plan(plan: dict, path: str) -> None:
    """
    Write the response dictionary to a JSON file.

    Creates parent folders if needed and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(plan, f, indent=2, ensure_ascii=False)
    logger.info(f"wrote {output_path}")


def _process(args: argparse.Namespace) -> int:
    try:
        request = load_input(Path(args.input))
    # UnicodeDecodeError, JSONDecodeError and pydantic ValidationError are ValueErrors
    except (OSError, ValueError) as e:
        print(f"Invalid input file {args.input}: {e}", file=sys.stderr)
        return 1

    plan = process_request(request, PackingEngine()).model_dump(mode="json")
    if args.output:
        write_plan(plan, args.output)
    else:
        print(json.dumps(plan, indent=2, ensure_ascii=False))
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "box_packing.api:app",
        host=args.host or get_host(),
        port=args.port or get_port(),
        log_level=get_log_level().lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Box Packing CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    process = sub.add_parser("process", help="Pack the pedidos of a request JSON file")
    process.add_argument("input", help="Input request JSON file")
    process.add_argument("--output", help="Output JSON file (default: print to stdout)")
    process.set_defaults(func=_process)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind host (default: BOX_PACKING_HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Bind port (default: PORT or 3000)")
    serve.set_defaults(func=_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_log_level())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
