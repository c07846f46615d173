from pathlib import Path

import yaml

from pf_ruler.bundles import bundle_for
from pf_ruler.rules.loader import RuleLoader
from pf_ruler.rules.parser import parse_global_markdown
from pf_ruler.scaffold import (
    GitignoreStatus,
    ProjectAnswers,
    ScaffoldService,
    format_list,
    render_requirements,
)


def _answers(**overrides) -> ProjectAnswers:
    values = {
        "project_name": "demo",
        "tech_stacks": ["Go+Gin", "PHP+Laravel", "JWT"],
        "ai_editors": ["Trae"],
    }
    values.update(overrides)
    return ProjectAnswers(**values)


def test_gitignore_missing(tmp_path: Path) -> None:
    assert ScaffoldService(tmp_path).ensure_gitignore() == GitignoreStatus.MISSING
    assert not (tmp_path / ".gitignore").exists()


def test_gitignore_appends_entry_with_newline_fix(tmp_path: Path) -> None:
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("node_modules", encoding="utf-8")
    assert ScaffoldService(tmp_path).ensure_gitignore() == GitignoreStatus.ADDED
    assert gitignore.read_text(encoding="utf-8") == "node_modules\n.ruler/\n"


def test_gitignore_already_present(tmp_path: Path) -> None:
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text(".ruler/\n", encoding="utf-8")
    assert ScaffoldService(tmp_path).ensure_gitignore() == GitignoreStatus.PRESENT
    assert gitignore.read_text(encoding="utf-8") == ".ruler/\n"


def test_format_list() -> None:
    assert format_list([]) == "暂无配置"
    assert format_list(["a", "b"]) == "- a\n- b"


def test_render_requirements_sections() -> None:
    text = render_requirements(_answers(), "2025-01-01 00:00:00")
    assert "## 项目基本信息\n- 项目名称：demo\n" in text
    assert "## 技术栈\n- Go+Gin\n- PHP+Laravel\n- JWT\n" in text
    assert "## 目标 AI 编辑器\n- Trae\n" in text


def test_run_writes_full_tree(tmp_path: Path) -> None:
    result = ScaffoldService(tmp_path).run(_answers())
    root = tmp_path / ".ruler"

    assert result.root == root
    for name in ("global", "project", "templates"):
        assert (root / name).is_dir()

    tech_stack = yaml.safe_load((root / "project" / "tech_stack.yaml").read_text(encoding="utf-8"))
    assert tech_stack["project_name"] == "demo"
    assert tech_stack["tech_stacks"] == ["Go+Gin", "PHP+Laravel", "JWT"]

    config = yaml.safe_load((root / "config.yaml").read_text(encoding="utf-8"))
    assert config["default_platform"] == "trae"
    assert config["rule_priority"] == ["project", "global", "templates"]

    assert sorted(path.name for path in (root / "global").iterdir()) == [
        "go_rules.md",
        "php_rules.md",
    ]
    assert root / "global" / "go_rules.md" in result.written


def test_scaffolded_tree_loads(tmp_path: Path) -> None:
    ScaffoldService(tmp_path).run(_answers(tech_stacks=["Go+Gin"]))
    rule_set = RuleLoader(tmp_path / ".ruler").load_all()

    assert [rule.title for rule in rule_set.project_rules] == [
        "技术栈规范",
        "代码规范",
        "安全约束",
    ]
    assert rule_set.metadata.project_name == "demo"
    file_titles = [rule.title for rule in rule_set.global_rules[5:]]
    assert file_titles == ["代码规范", "错误处理", "性能优化"]


def test_bundle_for_laravel_adds_section() -> None:
    filename, content = bundle_for("PHP+Laravel")
    assert filename == "php_rules.md"
    titles = [rule.title for rule in parse_global_markdown(content, filename)]
    assert titles[-1] == "Laravel 特定规范"
    _, plain = bundle_for("PHP+Slim")
    assert "Laravel" not in plain


def test_bundle_for_unknown_tech() -> None:
    assert bundle_for("MongoDB") is None
