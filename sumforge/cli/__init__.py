"""
SumForge CLI.

Command-line interface for formatting, editing, inspecting, and comparing go.sum files.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from sumforge import __version__
from sumforge.config import LOG_LEVELS, SumforgeConfig, load_config
from sumforge.core.errors import SumErrorList
from sumforge.core.module_version import ModuleVersion
from sumforge.core.sumfile.sum_file import SumFile
from sumforge.logging_config import setup_logging


def _load(config: SumforgeConfig, file: str | None) -> tuple[Path, SumFile]:
    from sumforge.io.sum_rw import read_sum_file

    path = Path(file or config.default_file)
    try:
        return path, read_sum_file(path, missing_ok=config.missing_ok)
    except FileNotFoundError:
        click.echo(f"Error: go.sum not found: {path}", err=True)
        raise SystemExit(1)
    except SumErrorList as e:
        click.echo("go.sum parse errors:", err=True)
        for error in e:
            click.echo(f"  - {error}", err=True)
        raise SystemExit(1)


def _save(config: SumforgeConfig, path: Path, sum_file: SumFile) -> int:
    from sumforge.io.sum_rw import write_sum_file

    return write_sum_file(path, sum_file, cleanup=config.cleanup_on_write)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", "config_path", type=click.Path(), help="Path to config YAML")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override configured log level",
)
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """SumForge: go.sum checksum manifest tools."""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        click.echo(f"Error: Config file not found: {config_path}", err=True)
        raise SystemExit(1)
    except yaml.YAMLError as e:
        click.echo(f"Error parsing config: {e}", err=True)
        raise SystemExit(1)
    except ValidationError as e:
        click.echo(f"Error in config: {e}", err=True)
        raise SystemExit(1)

    setup_logging(log_level or config.log_level_value)
    ctx.obj = config


@main.command("fmt")
@click.argument("file", required=False)
@click.option("--check", is_flag=True, help="Exit 1 if the file is not canonical")
@click.pass_obj
def fmt(config: SumforgeConfig, file: str | None, check: bool) -> None:
    """Rewrite a go.sum file in canonical form."""
    from sumforge.core.sumfile.format import is_canonical

    path, sum_file = _load(config, file)
    original = path.read_bytes() if path.exists() else b""

    if is_canonical(original, sum_file):
        click.echo(f"{path}: already canonical")
        return

    if check:
        click.echo(f"{path}: not canonical", err=True)
        raise SystemExit(1)

    count = _save(config, path, sum_file)
    click.echo(f"{path}: reformatted ({count} entries)")


@main.command()
@click.argument("file")
@click.argument("module_path")
@click.argument("version")
@click.argument("hash_value")
@click.option("--gomod", is_flag=True, help="Hash is of the module's go.mod file")
@click.pass_obj
def add(
    config: SumforgeConfig,
    file: str,
    module_path: str,
    version: str,
    hash_value: str,
    gomod: bool,
) -> None:
    """Add a hash entry to a go.sum file."""
    from sumforge.core.sumfile.parser import SPACE_CHARS

    fields = (("module path", module_path), ("version", version), ("hash", hash_value))
    for name, value in fields:
        if not value or any(c in SPACE_CHARS for c in value):
            click.echo(f"Error: {name} must be non-empty and contain no whitespace", err=True)
            raise SystemExit(1)

    path, sum_file = _load(config, file)
    before = len(sum_file)

    sum_file.add_hash(ModuleVersion(module_path, version), gomod, hash_value)

    if len(sum_file) == before:
        click.echo("Entry already present")
        return

    _save(config, path, sum_file)
    click.echo(f"Added {module_path} {version}{'/go.mod' if gomod else ''}")


@main.command()
@click.argument("file")
@click.argument("module_path")
@click.argument("version")
@click.option(
    "--kind",
    type=click.Choice(["zip", "gomod", "all"]),
    default="all",
    help="Which hashes to drop",
)
@click.pass_obj
def drop(
    config: SumforgeConfig,
    file: str,
    module_path: str,
    version: str,
    kind: str,
) -> None:
    """Drop hash entries for a module version."""
    path, sum_file = _load(config, file)
    mod = ModuleVersion(module_path, version)
    before = len(sum_file)

    if kind == "all":
        sum_file.drop_all(mod)
    else:
        sum_file.drop_hash(mod, kind == "gomod")

    removed = before - len(sum_file)
    if not removed:
        click.echo(f"No entries for {mod}")
        return

    _save(config, path, sum_file)
    click.echo(f"Dropped {removed} entries for {mod}")


@main.command()
@click.argument("file", required=False)
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_obj
def inspect(config: SumforgeConfig, file: str | None, as_json: bool) -> None:
    """Show the entries of a go.sum file."""
    from sumforge.core.json_canonical import canonical_json_dumps
    from sumforge.core.sumfile.hash import compute_file_hash, compute_sum_hash

    path, sum_file = _load(config, file)
    fingerprint = compute_sum_hash(sum_file)
    file_hash = compute_file_hash(path) if path.exists() else None
    canonical = file_hash in (None, fingerprint)

    if as_json:
        report = {
            "file": str(path),
            "hash": fingerprint,
            "file_hash": file_hash,
            "canonical": canonical,
            "entries": [h.to_dict() for h in sum_file.live_hashes()],
        }
        click.echo(canonical_json_dumps(report, indent=True))
        return

    modules = sum_file.modules()
    click.echo(f"=== {path} ===")
    click.echo(f"Entries: {len(sum_file)}")
    click.echo(f"Modules: {len(modules)}")
    click.echo(f"Hash: {fingerprint}")
    if file_hash is not None:
        click.echo(f"File hash: {file_hash} ({'canonical' if canonical else 'not canonical'})")
    for h in sum_file.live_hashes():
        click.echo(f"  {h.to_line()}")


@main.command("diff")
@click.argument("file_a")
@click.argument("file_b")
@click.pass_obj
def diff_files(config: SumforgeConfig, file_a: str, file_b: str) -> None:
    """Compare two go.sum files."""
    from sumforge.core.sumfile.hash import diff_sum_files

    path_a, sum_a = _load(config, file_a)
    path_b, sum_b = _load(config, file_b)

    diff = diff_sum_files(sum_a, sum_b)
    click.echo(f"Comparing {path_a} vs {path_b}")

    if diff.is_empty:
        click.echo("✓ Entries match")
        return

    for h in diff.removed:
        click.echo(f"- {h.to_line()}")
    for h in diff.added:
        click.echo(f"+ {h.to_line()}")


if __name__ == "__main__":
    main()
