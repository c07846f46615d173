"""Assemble a RuleSet from a rules root directory."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TypeVar

from pf_ruler.constants import (
    CONFIG_FILENAME,
    GLOBAL_DIRNAME,
    PROJECT_DIRNAME,
    REQUIREMENTS_FILENAME,
    RULESET_VERSION,
    TECH_STACK_FILENAME,
    TEMPLATES_DIRNAME,
    UNKNOWN_PROJECT_NAME,
)
from pf_ruler.errors import RuleLoadError, RulerAppError
from pf_ruler.rules.catalog import (
    GLOBAL_BASELINE,
    PROJECT_FALLBACK,
    build_all,
    tech_specific_rules,
    tech_stack_rule,
)
from pf_ruler.rules.models import Metadata, Rule, RuleSet
from pf_ruler.rules.parser import parse_global_markdown, parse_requirements
from pf_ruler.schema import CONFIG_SCHEMA, TECH_STACK_SCHEMA, load_yaml_mapping
from pf_ruler.utils import get_string, get_string_list, read_yaml_safe

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RuleLoader:
    """Load project, global and template rules plus metadata from ``root``.

    Missing ``project/``, ``global/`` or ``templates/`` directories contribute
    no parsed rules; the built-in project fallbacks, global baseline and
    tech-stack rules are still produced. Metadata needs both
    ``project/tech_stack.yaml`` and ``config.yaml``.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    @property
    def project_dir(self) -> Path:
        return self._root / PROJECT_DIRNAME

    @property
    def global_dir(self) -> Path:
        return self._root / GLOBAL_DIRNAME

    @property
    def templates_dir(self) -> Path:
        return self._root / TEMPLATES_DIRNAME

    @property
    def tech_stack_path(self) -> Path:
        return self.project_dir / TECH_STACK_FILENAME

    @property
    def config_path(self) -> Path:
        return self._root / CONFIG_FILENAME

    def load_project_rules(self) -> list[Rule]:
        if not self.project_dir.is_dir():
            logger.debug("No project directory at %s", self.project_dir)

        requirements_path = self.project_dir / REQUIREMENTS_FILENAME
        requirements = ""
        if requirements_path.is_file():
            requirements = requirements_path.read_text(
                encoding="utf-8", errors="replace"
            )

        tech_stack: dict[str, Any] = {}
        if self.tech_stack_path.is_file():
            tech_stack = load_yaml_mapping(self.tech_stack_path, TECH_STACK_SCHEMA)

        rules: list[Rule] = []
        tech_stacks = get_string_list(tech_stack, "tech_stacks")
        if tech_stacks:
            rules.append(tech_stack_rule(tech_stacks))
        rules.extend(parse_requirements(requirements))

        if not rules:
            logger.debug("No project rules found, using built-in defaults")
            rules = build_all(PROJECT_FALLBACK)
        return rules

    def load_global_rules(self) -> list[Rule]:
        file_rules: list[Rule] = []
        if self.global_dir.is_dir():
            file_rules = self._load_global_files()
        else:
            logger.debug("No global directory at %s", self.global_dir)

        rules = build_all(GLOBAL_BASELINE)
        rules.extend(tech_specific_rules(self.project_tech_stacks()))
        rules.extend(file_rules)
        return rules

    def _load_global_files(self) -> list[Rule]:
        rules: list[Rule] = []
        for child in sorted(self.global_dir.iterdir()):
            if child.suffix != ".md" or not child.is_file():
                continue
            try:
                text = child.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable rule file %s: %s", child, exc)
                continue
            parsed = parse_global_markdown(text, child.name)
            logger.debug("Parsed %d rules from %s", len(parsed), child.name)
            rules.extend(parsed)
        return rules

    def project_tech_stacks(self) -> list[str]:
        """Declared tech stacks, or an empty list when the file is unusable."""
        payload, error = read_yaml_safe(self.tech_stack_path)
        if error is not None:
            logger.debug("Ignoring unreadable %s: %s", self.tech_stack_path, error)
        if not isinstance(payload, dict):
            return []
        return get_string_list(payload, "tech_stacks")

    def load_template_rules(self) -> list[Rule]:
        """Reserved for user-authored templates under ``templates/``.

        No template format exists yet, so this always returns an empty list.
        """
        if not self.templates_dir.is_dir():
            logger.debug("No templates directory at %s", self.templates_dir)
        return []

    def load_metadata(self) -> Metadata:
        tech_stack = load_yaml_mapping(self.tech_stack_path, TECH_STACK_SCHEMA)
        load_yaml_mapping(self.config_path, CONFIG_SCHEMA)

        now = datetime.now()
        return Metadata(
            project_name=get_string(tech_stack, "project_name", UNKNOWN_PROJECT_NAME),
            tech_stacks=get_string_list(tech_stack, "tech_stacks"),
            ai_editors=get_string_list(tech_stack, "ai_editors"),
            created_at=now,
            last_updated_at=now,
            version=RULESET_VERSION,
        )

    def load_all(self) -> RuleSet:
        project_rules = _stage("project rules", self.load_project_rules)
        global_rules = _stage("global rules", self.load_global_rules)
        template_rules = _stage("template rules", self.load_template_rules)
        metadata = _stage("metadata", self.load_metadata)

        logger.debug(
            "Loaded %d project, %d global, %d template rules",
            len(project_rules),
            len(global_rules),
            len(template_rules),
        )
        return RuleSet(
            project_rules=project_rules,
            global_rules=global_rules,
            template_rules=template_rules,
            metadata=metadata,
        )


def _stage(label: str, load: Callable[[], T]) -> T:
    try:
        return load()
    except (RulerAppError, OSError, UnicodeDecodeError) as exc:
        raise RuleLoadError(label, exc) from exc
