import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest
import yaml


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture
def write_yaml():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(payload, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def ruler_root(tmp_path: Path) -> Path:
    return tmp_path / ".ruler"


@pytest.fixture
def minimal_ruler(ruler_root: Path, write_yaml) -> Path:
    """Rules root with only the two files metadata loading requires."""
    write_yaml(
        ruler_root / "project" / "tech_stack.yaml",
        {"project_name": "demo", "tech_stacks": ["Go+Gin"], "ai_editors": ["Trae"]},
    )
    write_yaml(ruler_root / "config.yaml", {"default_platform": "trae"})
    return ruler_root


@pytest.fixture
def cli_runner(tmp_path: Path, monkeypatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    return CliRunner()
