"""Command line entry point: ``artifact-uploader <token> <file> [<upload_path>]``."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from artifact_uploader import config
from artifact_uploader.errors import UploaderError
from artifact_uploader.log import setup_logging
from artifact_uploader.pipeline import publish

USAGE = "Usage: artifact-uploader <dropbox_token> <file_path> [<upload_path>]"

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(USAGE, file=sys.stderr)
        return 1

    setup_logging(config.LOG_LEVEL)

    token, file_path = args[0], args[1]
    upload_path = args[2] if len(args) >= 3 else None

    try:
        url = publish(file_path, token, upload_path)
    except (UploaderError, OSError) as exc:
        logger.debug("Upload of %s failed", file_path, exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    print(url)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
