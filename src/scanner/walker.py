"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import logging
import os
from typing import Iterator

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """사전 집계용 디렉터리 순회./Walk directories for the upfront count.

    Unreadable directories are still counted themselves; only their contents
    are skipped.
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        self._follow = follow_symlinks

    def iter_directories(self, root: str) -> Iterator[str]:
        """루트 포함 모든 디렉터리를 생성합니다./Yield root and every directory below it."""

        stack = [root]
        while stack:
            current = stack.pop()
            yield current
            try:
                with os.scandir(current) as iterator:
                    for entry in iterator:
                        try:
                            if entry.is_dir(follow_symlinks=self._follow):
                                stack.append(entry.path)
                        except OSError:
                            continue
            except OSError as exc:
                logger.debug("count skipped %s: %s", current, exc)

    def count_directories(self, root: str) -> int:
        """디렉터리 수를 셉니다./Count root plus all directories below it."""

        return sum(1 for _ in self.iter_directories(root))
