"""Tests for the requirements and global markdown parsers."""

from pf_ruler.rules.parser import parse_global_markdown, parse_requirements


REQUIREMENTS = """# demo 项目需求文档

## 项目基本信息
- 项目名称：demo
- 初始化时间：2025-01-01 10:00:00

## 技术栈
- Go+Gin

## 代码规范
函数命名采用 snake_case

每行代码不超过 80 字符

## 安全约束
敏感数据（如密码）需加密存储

## 目标 AI 编辑器
- Trae
"""


def test_requirements_emits_one_rule_per_section_in_order() -> None:
    text = "## 代码规范\nline a\n## 接口设计\nline b\n## 其他要求\nline c\n"
    rules = parse_requirements(text)
    assert [rule.title for rule in rules] == ["代码规范", "接口设计", "其他要求"]


def test_requirements_suppresses_info_sections() -> None:
    rules = parse_requirements(REQUIREMENTS)
    titles = [rule.title for rule in rules]
    assert titles == ["代码规范", "安全约束"]
    assert "技术栈" not in titles
    assert "项目基本信息" not in titles
    assert "目标 AI 编辑器" not in titles


def test_requirements_body_drops_blank_and_heading_lines() -> None:
    text = "## 代码规范\n  first  \n\n### sub heading\n# top\nsecond\n"
    rules = parse_requirements(text)
    assert len(rules) == 1
    assert rules[0].content == "first\nsecond"


def test_requirements_skips_sections_without_body() -> None:
    text = "## 空章节\n\n## 代码规范\nuse snake_case\n## 结尾\n"
    rules = parse_requirements(text)
    assert [rule.title for rule in rules] == ["代码规范"]


def test_requirements_without_headers_yields_nothing() -> None:
    assert parse_requirements("just some text\n- and a bullet\n") == []
    assert parse_requirements("") == []


def test_requirements_rule_fields() -> None:
    rule = parse_requirements("## 代码规范\nuse snake_case\n")[0]
    assert rule.description == "项目 代码规范 相关的要求和规范"
    assert rule.type == "code_style"
    assert rule.tags == ["code", "style", "naming", "代码规范"]
    assert rule.priority == 4
    assert rule.enabled is True


def test_requirements_security_and_performance_get_top_priority() -> None:
    text = "## 安全约束\na\n## 性能要求\nb\n## 接口规范\nc\n## 数据安全\nd\n"
    priorities = {rule.title: rule.priority for rule in parse_requirements(text)}
    assert priorities == {"安全约束": 5, "性能要求": 5, "接口规范": 4, "数据安全": 5}


def test_requirements_title_tag_is_lowercased() -> None:
    rule = parse_requirements("## API Design\nREST only\n")[0]
    assert rule.type == "api"
    assert rule.tags[-1] == "api design"
    assert rule.title == "API Design"


def test_global_parses_bullet_sections() -> None:
    text = (
        "# Go 开发规范\n\n"
        "## 代码规范\n- 使用 gofmt\n- 使用 go mod\n\n"
        "## 错误处理\n- 始终检查错误\n"
    )
    rules = parse_global_markdown(text, "go_rules.md")
    assert [rule.title for rule in rules] == ["代码规范", "错误处理"]
    assert rules[0].content == "- 使用 gofmt\n- 使用 go mod"
    assert rules[0].description == "来自 go_rules.md 的规则"
    assert rules[0].type == "code_style"
    assert rules[0].tags == ["go", "code_style"]
    assert rules[1].type == "general"
    assert rules[1].tags == ["go"]
    assert all(rule.priority == 4 for rule in rules)


def test_global_ignores_non_bullet_lines() -> None:
    text = "## 安全规范\nplain prose\n- real bullet\n* star bullet\n"
    rules = parse_global_markdown(text, "nodejs_rules.md")
    assert len(rules) == 1
    assert rules[0].content == "- real bullet"
    assert rules[0].tags == ["nodejs", "security"]


def test_global_drops_sections_without_bullets() -> None:
    with_empty = "## 代码规范\n- a\n## 空章节\nno bullets here\n## 测试\n- b\n"
    without_empty = "## 代码规范\n- a\n## 测试\n- b\n"
    assert len(parse_global_markdown(with_empty, "x.md")) == len(
        parse_global_markdown(without_empty, "x.md")
    )
    assert [r.title for r in parse_global_markdown(with_empty, "x.md")] == [
        "代码规范",
        "测试",
    ]


def test_global_drops_trailing_empty_section() -> None:
    rules = parse_global_markdown("## 性能优化\n- cache it\n## 尾部\n", "cache_rules.md")
    assert [rule.title for rule in rules] == ["性能优化"]
    assert rules[0].type == "performance"
    assert rules[0].tags == ["cache", "performance"]


def test_global_bullets_before_first_section_are_ignored() -> None:
    assert parse_global_markdown("- orphan\n", "misc.md") == []


def test_requirements_split_on_newline_only() -> None:
    text = "## 代码规范\nuse a\u2028## 接口设计\nline b\x0cmore\n"
    rules = parse_requirements(text)
    assert [rule.title for rule in rules] == ["代码规范"]
    assert rules[0].content == "use a\u2028## 接口设计\nline b\x0cmore"


def test_requirements_handles_crlf() -> None:
    rules = parse_requirements("## 代码规范\r\nuse gofmt\r\n")
    assert [rule.title for rule in rules] == ["代码规范"]
    assert rules[0].content == "use gofmt"


def test_global_split_on_newline_only() -> None:
    text = "## 代码规范\n- a\u2028## 伪标题\n- b\n"
    rules = parse_global_markdown(text, "go_rules.md")
    assert [rule.title for rule in rules] == ["代码规范"]
    assert rules[0].content == "- a\u2028## 伪标题\n- b"
