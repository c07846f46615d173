import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

import click
from rich.console import Console
from rich.logging import RichHandler

from pf_ruler import __version__
from pf_ruler.constants import (
    AI_EDITOR_OPTIONS,
    CONFIG_FILENAME,
    DEFAULT_PLATFORM,
    RULER_DIRNAME,
    TECH_STACK_OPTIONS,
)
from pf_ruler.errors import RulerAppError
from pf_ruler.output import write_output
from pf_ruler.platforms import default_registry
from pf_ruler.rules.loader import RuleLoader
from pf_ruler.rules.models import RuleSet
from pf_ruler.scaffold import (
    DEFAULT_CODE_STANDARDS,
    DEFAULT_SECURITY_CONSTRAINTS,
    ProjectAnswers,
    ScaffoldService,
)
from pf_ruler.tui import RulerConsoleUI
from pf_ruler.utils import get_string, read_yaml_safe


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _rules_root(root: Optional[Path]) -> Path:
    if root is not None:
        return root
    return Path.cwd() / RULER_DIRNAME


def _default_platform(root: Path) -> str:
    payload, _ = read_yaml_safe(root / CONFIG_FILENAME)
    if not isinstance(payload, dict):
        return DEFAULT_PLATFORM
    return get_string(payload, "default_platform", DEFAULT_PLATFORM)


def _load_rule_set(root: Path) -> RuleSet:
    if not root.is_dir():
        raise click.ClickException(
            f"Rules directory not found: {root}. Run `pf-ruler init` first."
        )
    try:
        return RuleLoader(root).load_all()
    except RulerAppError as exc:
        raise click.ClickException(str(exc))


def _root_option():
    return click.option(
        "--root",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help=f"Rules root directory (default: ./{RULER_DIRNAME}).",
    )


def _prompt_multi(label: str, options: Sequence[str]) -> list[str]:
    click.echo(label)
    for index, option in enumerate(options, start=1):
        click.echo(f"  {index}. {option}")
    raw = click.prompt(
        "Numbers separated by commas (empty for none)",
        default="",
        show_default=False,
    )
    picked: list[str] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(options):
            raise click.BadParameter(f"Invalid choice: {part}")
        option = options[int(part) - 1]
        if option not in picked:
            picked.append(option)
    return picked


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="pf-ruler")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Unified AI-editor rule management."""
    _configure_logging(verbose)
    ctx.obj = {"verbose": verbose}


@cli.command(help="Create the .ruler directory and starter rule files.")
@click.option("--name", "project_name", default=None, help="Project name.")
@click.option("--tech", "tech_stacks", multiple=True, help="Tech stack, repeatable.")
@click.option("--editor", "ai_editors", multiple=True, help="Target AI editor, repeatable.")
@click.option("--code-standards", default=None, help="Code style requirements.")
@click.option("--security", "security_constraints", default=None, help="Security constraints.")
@click.option("--no-input", is_flag=True, help="Do not prompt; use options and defaults.")
@click.pass_obj
def init(
    obj: Dict[str, bool],
    project_name: Optional[str],
    tech_stacks: tuple[str, ...],
    ai_editors: tuple[str, ...],
    code_standards: Optional[str],
    security_constraints: Optional[str],
    no_input: bool,
) -> None:
    ui = RulerConsoleUI(Console())
    project_root = Path.cwd()
    interactive = not no_input

    if project_name is None:
        project_name = project_root.name
        if interactive:
            project_name = click.prompt("Project name", default=project_name)
    techs = list(tech_stacks)
    if not techs and interactive:
        techs = _prompt_multi("Select tech stacks:", TECH_STACK_OPTIONS)
    if code_standards is None:
        code_standards = DEFAULT_CODE_STANDARDS
        if interactive:
            code_standards = click.prompt("Code standards", default=code_standards)
    if security_constraints is None:
        security_constraints = DEFAULT_SECURITY_CONSTRAINTS
        if interactive:
            security_constraints = click.prompt(
                "Security constraints", default=security_constraints
            )
    editors = list(ai_editors)
    if not editors and interactive:
        editors = _prompt_multi("Select target AI editors:", AI_EDITOR_OPTIONS)

    answers = ProjectAnswers(
        project_name=project_name,
        tech_stacks=techs,
        ai_editors=editors,
        code_standards=code_standards,
        security_constraints=security_constraints,
    )
    try:
        result = ScaffoldService(project_root).run(answers)
    except OSError as exc:
        raise click.ClickException(f"Failed to initialise rules directory: {exc}")
    ui.render_scaffold(result)


@cli.command(help="Convert the unified rules into a platform rule file.")
@click.option("-p", "--platform", "platform_name", default=None, help="Target platform.")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing output file.")
@_root_option()
@click.pass_obj
def generate(
    obj: Dict[str, bool],
    platform_name: Optional[str],
    force: bool,
    root: Optional[Path],
) -> None:
    ui = RulerConsoleUI(Console())
    rules_root = _rules_root(root)
    registry = default_registry()

    name = (platform_name or _default_platform(rules_root)).lower()
    try:
        adapter = registry.require(name)
    except RulerAppError as exc:
        raise click.ClickException(str(exc))

    rule_set = _load_rule_set(rules_root)
    ui.render_rule_set(rule_set)

    output_path = Path.cwd() / adapter.default_output_path
    try:
        data = adapter.convert(rule_set)
        status = write_output(output_path, data, force=force)
    except RulerAppError as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise click.ClickException(f"Failed to write {output_path}: {exc}")
    ui.render_written(adapter.name, output_path, status)


@cli.command(help="Load the unified rules and print a summary.")
@_root_option()
@click.pass_obj
def show(obj: Dict[str, bool], root: Optional[Path]) -> None:
    ui = RulerConsoleUI(Console())
    ui.render_rule_set(_load_rule_set(_rules_root(root)))


@cli.command(help="List supported platforms and their output paths.")
@_root_option()
@click.pass_obj
def platforms(obj: Dict[str, bool], root: Optional[Path]) -> None:
    ui = RulerConsoleUI(Console())
    registry = default_registry()
    ui.render_platforms(registry.adapters(), _default_platform(_rules_root(root)))


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
