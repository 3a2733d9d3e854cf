'''DriveStorage 실행 래퍼(KR). DriveStorage launcher wrapper (EN).'''

from __future__ import annotations

import sys
from pathlib import Path

# Ensure local packages are discoverable when run as a script
CURRENT_DIR = Path(__file__).resolve().parent
if str(CURRENT_DIR) not in sys.path:
    sys.path.insert(0, str(CURRENT_DIR))

from cli.drivestore import cli, main  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ['cli', 'main']


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
