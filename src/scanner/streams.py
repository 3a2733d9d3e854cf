"""오류/진행 로그 스트림 이름./Names of the error and progress log streams."""

from __future__ import annotations

import logging

ERROR_STREAM = "scanner.errors"
PROGRESS_STREAM = "scanner.progress"

error_log = logging.getLogger(ERROR_STREAM)
progress_log = logging.getLogger(PROGRESS_STREAM)
