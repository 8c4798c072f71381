"""Entrypoint: python -m presence_gateway KIND FILE

Decodes a captured gateway payload and prints its normalized wire form.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from presence_gateway.application.exceptions import AppError
from presence_gateway.config import settings
from presence_gateway.infrastructure.wire.serializer import encode_model
from presence_gateway.services import session_service

logger = logging.getLogger(__name__)

LOADERS = {
    "ready": session_service.load_ready,
    "presence": session_service.load_presence,
    "activity": session_service.load_activity,
    "bot-gateway": session_service.load_bot_gateway,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="presence_gateway", description=__doc__)
    parser.add_argument("kind", choices=sorted(LOADERS))
    parser.add_argument("file", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        model = LOADERS[args.kind](args.file.read_bytes())
        output = encode_model(model)
    except AppError as exc:
        logger.error("Failed to process %s: %s", args.file, exc.detail)
        return 1
    except OSError as exc:
        logger.error("Failed to read %s: %s", args.file, exc)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
