'''DriveStorage CLI 진입점(KR). DriveStorage CLI entrypoint (EN).'''

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Sequence

import click

from core import ScanConfig, ScanSetupError, configure_logging, format_gb, local_now
from report import describe_folder, render_progress_bar
from scan import emit_scan, scan_volume
from src.scanner import ProgressEvent, SizeMode
from src.scanner.streams import error_log
from src.scanner.volumes import list_volumes
from utils import format_bytes

logger = logging.getLogger(__name__)


def _info(message: str) -> None:
    click.secho(message, fg='green')


def _success(message: str) -> None:
    click.secho(message, fg='yellow')


def _error(message: str) -> None:
    click.secho(message, fg='red', err=True)


class ProgressPrinter:
    '''진행 막대를 한 줄에 갱신 · Redraw the progress bar in place.'''

    def __init__(self, width: int) -> None:
        self._width = width
        self._lock = threading.Lock()
        self.drawn = False

    def __call__(self, event: ProgressEvent) -> None:
        with self._lock:
            bar = render_progress_bar(event.completed, event.total, self._width)
            click.echo(f'\r{bar}', nl=False)
            self.drawn = True

    def interrupt(self, message: str) -> None:
        '''막대 아래에 오류를 출력 · Print an error line below the bar.'''

        with self._lock:
            if self.drawn:
                click.echo()
                self.drawn = False
            _error(message)


class ConsoleErrorHandler(logging.Handler):
    '''오류 스트림을 즉시 콘솔에 표시 · Echo error stream records as they happen.'''

    def __init__(self, printer: ProgressPrinter) -> None:
        super().__init__(level=logging.ERROR)
        self._printer = printer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._printer.interrupt(record.getMessage())
        except Exception:  # pragma: no cover
            self.handleError(record)


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    '''폴더 용량 분석 CLI · Folder disk usage CLI.'''

    level = 'INFO'
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    try:
        config = ScanConfig.from_file(config_file) if config_file else ScanConfig()
    except ValueError as exc:
        raise click.ClickException(f'invalid config file {config_file}: {exc}') from exc
    config.paths.ensure()
    configure_logging(
        log_file or config.paths.app_log,
        level=level,
        error_log=config.paths.error_log,
        progress_log=config.paths.progress_log,
    )
    ctx.obj = {'config': config}


@cli.command()
def drives() -> None:
    '''사용 가능한 드라이브를 표시 · List available drives.'''

    _info('Available Drives:')
    for volume in list_volumes():
        _info(
            f'{volume.mountpoint} - {volume.fstype or "unknown"} '
            f'({format_gb(volume.used)} / {format_gb(volume.total)} GB used)'
        )


@cli.command()
@click.argument('root', required=False)
@click.option(
    '--include-hidden/--exclude-hidden',
    default=None,
    help='숨김/시스템 포함 여부 · Include system and hidden entries',
)
@click.option('--top', type=int, default=None, help='표시할 상위 폴더 수 · Number of top folders')
@click.option(
    '--size-mode',
    type=click.Choice([mode.value for mode in SizeMode]),
    default=None,
    help='자체 또는 하위 합계 · Own files only or whole subtree',
)
@click.option('--workers', type=int, default=None, help='작업자 수 · Worker threads')
@click.option(
    '--export/--no-export',
    default=None,
    help='CSV 내보내기 여부 · Export results to CSV',
)
@click.option(
    '--csv',
    'csv_path',
    type=click.Path(path_type=Path),
    default=None,
    help='CSV 경로 · CSV output path',
)
@click.pass_context
def scan(
    ctx: click.Context,
    root: str | None,
    include_hidden: bool | None,
    top: int | None,
    size_mode: str | None,
    workers: int | None,
    export: bool | None,
    csv_path: Path | None,
) -> None:
    '''볼륨을 스캔하고 상위 폴더를 보여준다 · Scan a volume and show the top folders.'''

    config: ScanConfig = ctx.obj['config']
    if root is None:
        root = click.prompt('Enter the drive letter or path you want to check', type=str)
    if include_hidden is None:
        include_hidden = config.include_system_and_hidden
    if top is not None:
        config.top_count = top
    if workers is not None and workers < 1:
        raise click.BadParameter('must be at least 1', param_hint='--workers')
    mode = SizeMode(size_mode) if size_mode else config.size_mode

    _info('Scanning drive. This might take a while...')
    printer = ProgressPrinter(config.progress_bar_width)
    console = ConsoleErrorHandler(printer)
    error_log.addHandler(console)
    try:
        result = scan_volume(
            root,
            include_system_and_hidden=include_hidden,
            top=config.top_count,
            size_mode=mode,
            max_workers=workers or config.max_workers,
            follow_symlinks=config.follow_symlinks,
            check_access=config.check_access,
            progress_callback=printer,
        )
    finally:
        error_log.removeHandler(console)
    if printer.drawn:
        click.echo()

    stats = result.outcome.statistics()
    scanned_bytes = sum(record.total_size for record in result.outcome.results)
    _info(
        f'Scanned {stats.folders_completed} of {stats.folders_total} folders '
        f'({format_bytes(scanned_bytes)}) in {stats.duration_seconds:.2f}s ({stats.errors} errors)'
    )
    _info('Top folders by size:')
    for folder in result.folders:
        for line in describe_folder(folder):
            _info(line)

    if export is None:
        export = click.confirm('Do you want to export the results to a CSV file?', default=False)
    if export:
        target = csv_path or config.paths.csv_path
        emit_scan(result.folders, target)
        logger.info('exported %d folders to %s at %s', len(result.folders), target, local_now())
        _success(f'Results exported to {target}')


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = argv or sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name='drivestore', standalone_mode=False)
    except ScanSetupError as exc:
        _error(str(exc))
        return 1
    except click.exceptions.Abort:
        _error('Aborted!')
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
