'''KR: 테스트 볼륨 픽스처. EN: Pytest volume fixtures.'''

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from src.scanner.streams import ERROR_STREAM, PROGRESS_STREAM
from tests.fixtures.virtual_fs import create_sized_tree


class ListHandler(logging.Handler):
    '''레코드를 메모리에 모은다(KR). Keep emitted messages in memory (EN).'''

    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture
def volume_tree(tmp_path: Path) -> Path:
    '''root/a/x.txt, root/b/, root/y.log 트리를 만든다(KR). Build the reference tree (EN).'''

    root = tmp_path / 'volume'
    create_sized_tree(root, {'a/x.txt': 1000, 'y.log': 2000})
    (root / 'b').mkdir()
    return root


def _capture(name: str) -> Iterator[ListHandler]:
    logger = logging.getLogger(name)
    handler = ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


@pytest.fixture
def error_stream() -> Iterator[ListHandler]:
    '''오류 스트림을 캡처한다(KR). Capture the error log stream (EN).'''

    yield from _capture(ERROR_STREAM)


@pytest.fixture
def progress_stream() -> Iterator[ListHandler]:
    '''진행 스트림을 캡처한다(KR). Capture the progress log stream (EN).'''

    yield from _capture(PROGRESS_STREAM)
