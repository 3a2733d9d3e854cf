"""CLI 명령을 검증합니다./Validate the command line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

import scan as scan_stage
from cli import drivestore
from cli.drivestore import ConsoleErrorHandler, ProgressPrinter, cli, main
from core import ScanSetupError
from report import load_csv
from src.scanner import ProgressEvent
from src.scanner.volumes import VolumeInfo


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """로그가 임시 폴더에 쌓이도록 합니다./Run with logs inside a temp folder."""

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


def test_scan_prints_top_folders(volume_tree: Path, workdir: Path) -> None:
    """상위 폴더와 확장자 분포를 출력합니다./Prints the top folders with breakdowns."""

    result = CliRunner().invoke(cli, ["scan", str(volume_tree), "--top", "2", "--no-export"])
    assert result.exit_code == 0, result.output
    assert "Top folders by size:" in result.output
    assert f"{volume_tree} - 0.00 GB" in result.output
    assert "  .log: 1 files" in result.output
    assert "100.0%" in result.output
    assert f"{volume_tree / 'b'} -" not in result.output
    assert (workdir / "ErrorLog.txt").exists()
    assert not (workdir / "FolderSizes.csv").exists()


def test_scan_exports_csv(volume_tree: Path, workdir: Path) -> None:
    """CSV를 내보냅니다./Exports the ranked folders to CSV."""

    target = workdir / "out" / "sizes.csv"
    result = CliRunner().invoke(
        cli, ["scan", str(volume_tree), "--export", "--csv", str(target), "--workers", "2"]
    )
    assert result.exit_code == 0, result.output
    assert f"Results exported to {target}" in result.output
    rows = load_csv(target)
    assert [row.path for row in rows] == [
        str(volume_tree),
        str(volume_tree / "a"),
        str(volume_tree / "b"),
    ]


def test_scan_prompts_when_options_missing(volume_tree: Path, workdir: Path) -> None:
    """옵션이 없으면 입력을 요청합니다./Prompts for the root and the export choice."""

    result = CliRunner().invoke(cli, ["scan"], input=f"{volume_tree}\nyes\n")
    assert result.exit_code == 0, result.output
    assert "Enter the drive letter or path you want to check" in result.output
    assert (workdir / "FolderSizes.csv").exists()


def test_invalid_top_defaults_to_100(tmp_path: Path, workdir: Path) -> None:
    """0 이하의 개수는 100으로 처리합니다./Non-positive --top falls back to 100."""

    for index in range(3):
        (tmp_path / "many" / f"d{index}").mkdir(parents=True)
    result = CliRunner().invoke(cli, ["scan", str(tmp_path / "many"), "--top", "0", "--no-export"])
    assert result.exit_code == 0, result.output
    assert result.output.count("File types breakdown:") == 4


def test_main_reports_invalid_root(tmp_path: Path, workdir: Path) -> None:
    """잘못된 루트는 종료 코드 1./An invalid root exits with status 1."""

    assert main(["scan", str(tmp_path / "missing"), "--no-export"]) == 1


def test_drives_lists_volumes(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """드라이브 목록을 표시합니다./Lists available drives."""

    volume = VolumeInfo(
        mountpoint="/mnt/data",
        device="/dev/sdb1",
        fstype="ext4",
        total=4 * 1024**3,
        used=1024**3,
        free=3 * 1024**3,
        percent=25.0,
    )
    monkeypatch.setattr(drivestore, "list_volumes", lambda: [volume])
    result = CliRunner().invoke(cli, ["drives"])
    assert result.exit_code == 0, result.output
    assert "Available Drives:" in result.output
    assert "/mnt/data - ext4 (1.00 / 4.00 GB used)" in result.output


def test_config_file_is_applied(volume_tree: Path, workdir: Path) -> None:
    """설정 파일의 값을 사용합니다./Values from the config file are used."""

    config_file = workdir / "drivestore.yml"
    config_file.write_text(
        "top_count: 1\nsize_mode: subtree\npaths:\n  error_log: logs/errors.txt\n",
        encoding="utf-8",
    )
    result = CliRunner().invoke(
        cli, ["--config-file", str(config_file), "scan", str(volume_tree), "--no-export"]
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("File types breakdown:") == 1
    assert (workdir / "logs" / "errors.txt").exists()


class _DenyChecker:
    def __init__(self, denied: Path) -> None:
        self._denied = str(denied)

    def can_read(self, path: str) -> bool:
        return path != self._denied


def test_scan_errors_are_printed_once(
    volume_tree: Path, workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """접근 거부는 한 번만 표시됩니다./An access error is shown once, as it happens."""

    denied = volume_tree / "a"
    monkeypatch.setattr(scan_stage, "make_access_checker", lambda enabled: _DenyChecker(denied))
    result = CliRunner().invoke(cli, ["scan", str(volume_tree), "--no-export"])
    assert result.exit_code == 0, result.output
    message = f"Access denied to directory {denied}"
    assert result.output.count(message) == 1
    assert "(1 errors)" in result.output
    assert message in (workdir / "ErrorLog.txt").read_text(encoding="utf-8")
    assert not any(
        isinstance(handler, ConsoleErrorHandler) for handler in drivestore.error_log.handlers
    )


def test_console_handler_breaks_the_progress_line(capsys: pytest.CaptureFixture[str]) -> None:
    """오류는 진행 막대 다음 줄에 출력됩니다./Errors start on a fresh line below the bar."""

    printer = ProgressPrinter(width=10)
    handler = ConsoleErrorHandler(printer)
    printer(ProgressEvent(completed=1, total=2, current_path="/x"))
    handler.handle(logging.makeLogRecord({"msg": "Path too long: /x", "levelno": logging.ERROR}))

    captured = capsys.readouterr()
    assert captured.out == "\r[#####-----] 50.0%\n"
    assert captured.err == "Path too long: /x\n"
    assert printer.drawn is False


def test_root_is_validated_once(
    volume_tree: Path, workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """루트 검증은 한 번만 수행됩니다./The root is validated exactly once per scan."""

    calls: list[str] = []
    real_validate = scan_stage.validate_root

    def _counting(value: str) -> str:
        calls.append(value)
        return real_validate(value)

    monkeypatch.setattr(scan_stage, "validate_root", _counting)
    result = CliRunner().invoke(cli, ["scan", str(volume_tree), "--no-export"])
    assert result.exit_code == 0, result.output
    assert calls == [str(volume_tree)]


def test_invalid_root_raises_setup_error(tmp_path: Path, workdir: Path) -> None:
    """잘못된 루트는 ScanSetupError로 끝납니다./An invalid root ends in ScanSetupError."""

    result = CliRunner().invoke(cli, ["scan", str(tmp_path / "missing"), "--no-export"])
    assert result.exit_code != 0
    assert isinstance(result.exception, ScanSetupError)
    assert result.exception.stage == "validate"
