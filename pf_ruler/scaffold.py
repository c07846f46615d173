"""Create the .ruler directory tree and its starter files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pf_ruler.bundles import bundle_for
from pf_ruler.constants import (
    CONFIG_FILENAME,
    DEFAULT_PLATFORM,
    GITIGNORE_ENTRY,
    GITIGNORE_FILENAME,
    GLOBAL_DIRNAME,
    PROJECT_DIRNAME,
    REQUIREMENTS_FILENAME,
    RULER_DIRNAME,
    TECH_STACK_FILENAME,
    TEMPLATES_DIRNAME,
)
from pf_ruler.utils import now_stamp, write_yaml

logger = logging.getLogger(__name__)

DEFAULT_CODE_STANDARDS = "函数命名采用 snake_case，每行代码不超过 80 字符"
DEFAULT_SECURITY_CONSTRAINTS = "敏感数据（如密码）需加密存储"
EMPTY_LIST_PLACEHOLDER = "暂无配置"


class GitignoreStatus(str, Enum):
    MISSING = "missing"
    PRESENT = "present"
    ADDED = "added"


@dataclass
class ProjectAnswers:
    project_name: str
    tech_stacks: list[str] = field(default_factory=list)
    ai_editors: list[str] = field(default_factory=list)
    code_standards: str = DEFAULT_CODE_STANDARDS
    security_constraints: str = DEFAULT_SECURITY_CONSTRAINTS


@dataclass
class ScaffoldResult:
    root: Path
    gitignore: GitignoreStatus
    written: list[Path] = field(default_factory=list)


def format_list(items: list[str], prefix: str = "- ") -> str:
    if not items:
        return EMPTY_LIST_PLACEHOLDER
    return "\n".join(f"{prefix}{item}" for item in items)


def render_requirements(answers: ProjectAnswers, created: str) -> str:
    return (
        f"# {answers.project_name} 项目需求文档\n\n"
        "## 项目基本信息\n"
        f"- 项目名称：{answers.project_name}\n"
        f"- 初始化时间：{created}\n\n"
        "## 技术栈\n"
        f"{format_list(answers.tech_stacks)}\n\n"
        "## 代码规范\n"
        f"{answers.code_standards}\n\n"
        "## 安全约束\n"
        f"{answers.security_constraints}\n\n"
        "## 目标 AI 编辑器\n"
        f"{format_list(answers.ai_editors)}\n"
    )


class ScaffoldService:
    def __init__(self, project_root: Path) -> None:
        self._project_root = project_root

    @property
    def ruler_root(self) -> Path:
        return self._project_root / RULER_DIRNAME

    def create_dirs(self) -> None:
        for name in (GLOBAL_DIRNAME, PROJECT_DIRNAME, TEMPLATES_DIRNAME):
            (self.ruler_root / name).mkdir(parents=True, exist_ok=True)

    def ensure_gitignore(self) -> GitignoreStatus:
        path = self._project_root / GITIGNORE_FILENAME
        if not path.exists():
            logger.warning("No %s found, rule files may end up in version control", path)
            return GitignoreStatus.MISSING

        content = path.read_text(encoding="utf-8")
        if GITIGNORE_ENTRY in content:
            return GitignoreStatus.PRESENT

        with path.open("a", encoding="utf-8") as handle:
            if content and not content.endswith("\n"):
                handle.write("\n")
            handle.write(f"{GITIGNORE_ENTRY}\n")
        return GitignoreStatus.ADDED

    def write_project_files(self, answers: ProjectAnswers) -> list[Path]:
        created = now_stamp()
        project_dir = self.ruler_root / PROJECT_DIRNAME

        requirements_path = project_dir / REQUIREMENTS_FILENAME
        requirements_path.parent.mkdir(parents=True, exist_ok=True)
        requirements_path.write_text(
            render_requirements(answers, created), encoding="utf-8"
        )

        tech_stack_path = project_dir / TECH_STACK_FILENAME
        write_yaml(
            tech_stack_path,
            {
                "project_name": answers.project_name,
                "tech_stacks": list(answers.tech_stacks),
                "ai_editors": list(answers.ai_editors),
                "created_at": created,
            },
        )
        return [requirements_path, tech_stack_path]

    def write_config(self) -> Path:
        path = self.ruler_root / CONFIG_FILENAME
        write_yaml(
            path,
            {
                "default_platform": DEFAULT_PLATFORM,
                "rule_priority": [PROJECT_DIRNAME, GLOBAL_DIRNAME, TEMPLATES_DIRNAME],
                "last_init_time": now_stamp(),
            },
        )
        return path

    def write_global_bundles(self, tech_stacks: list[str]) -> list[Path]:
        written: list[Path] = []
        global_dir = self.ruler_root / GLOBAL_DIRNAME
        for tech in tech_stacks:
            bundle = bundle_for(tech)
            if bundle is None:
                logger.debug("No global bundle for tech stack %r", tech)
                continue
            filename, content = bundle
            path = global_dir / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            if path not in written:
                written.append(path)
        return written

    def run(self, answers: ProjectAnswers) -> ScaffoldResult:
        self.create_dirs()
        result = ScaffoldResult(root=self.ruler_root, gitignore=self.ensure_gitignore())
        result.written.extend(self.write_project_files(answers))
        result.written.append(self.write_config())
        result.written.extend(self.write_global_bundles(answers.tech_stacks))
        return result
