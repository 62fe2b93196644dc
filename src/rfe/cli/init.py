"""rfe init command - scaffold devenv files into a directory."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

import click
import structlog

from rfe.config.constants import SCAFFOLD_FILES
from rfe.config.models import RfeConfig
from rfe.core.errors import ErrorCode, RfeError, SourceError
from rfe.core.progress import get_console, pluralize, spinner, status
from rfe.sources import SourceContentReader

log = structlog.get_logger()


@dataclass
class ScaffoldResult:
    """Outcome of writing scaffold files into a target directory."""

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.missing


def scaffold(
    target: Path,
    reader: SourceContentReader,
    *,
    filenames: tuple[str, ...] = SCAFFOLD_FILES,
    force: bool = False,
) -> ScaffoldResult:
    """Write each of *filenames* into *target* using contents from *reader*.

    Existing files are left alone unless *force*. A file that neither the
    source nor the default templates provide is recorded as missing; any
    other read error propagates.
    """
    target.mkdir(parents=True, exist_ok=True)
    result = ScaffoldResult()

    for filename in filenames:
        dest = target / filename
        if dest.exists() and not force:
            status(f"{filename} exists, skipping (use --force to overwrite)", style="warning")
            result.skipped.append(filename)
            continue

        try:
            contents = reader.read_file_contents(filename)
        except SourceError as e:
            if e.code is not ErrorCode.FILE_NOT_FOUND:
                raise
            status(f"{filename}: not found in source or default templates", style="error")
            result.missing.append(filename)
            continue

        dest.write_text(contents, encoding="utf-8")
        log.info("scaffold_written", path=str(dest))
        status(f"Wrote {filename}", style="success")
        result.written.append(filename)

    return result


def _open_reader(source: str | None, config: RfeConfig) -> SourceContentReader:
    if source is None:
        return SourceContentReader.defaults_only()
    with spinner(f"Resolving {source}"):
        return SourceContentReader.open(source, config=config.sources)


@click.command()
@click.argument(
    "target",
    default=None,
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--source", "-s", default=None, help="Directory, local repo or https repo URL")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing files")
@click.pass_context
def init_command(ctx: click.Context, target: Path | None, source: str | None, force: bool) -> None:
    """Scaffold devenv.yaml, devenv.nix, .gitignore and .envrc.

    TARGET is the directory to write into (default: current directory).
    Files are taken from SOURCE when it has them, otherwise from the
    built-in templates.
    """
    config: RfeConfig = (ctx.obj or {}).get("config") or RfeConfig()
    target_dir = target or Path.cwd()

    try:
        with _open_reader(source, config) as reader:
            if source is not None:
                status(f"Using {reader.kind.value.replace('_', ' ')} source: {source}")
            result = scaffold(target_dir, reader, force=force)
    except RfeError as e:
        raise click.ClickException(str(e)) from e

    get_console().print()
    status(
        f"{pluralize(len(result.written), 'file')} written, "
        f"{len(result.skipped)} skipped in {target_dir}",
        style="success" if result.success else "warning",
    )
    if not result.success:
        sys.exit(1)
