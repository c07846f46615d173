"""Built-in rules: project fallbacks, global baseline and per-technology rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pf_ruler.rules.models import Rule, RuleType


@dataclass(frozen=True)
class RuleTemplate:
    title: str
    description: str
    type: RuleType
    content: str
    priority: int
    tags: tuple[str, ...]

    def build(self) -> Rule:
        return Rule(
            title=self.title,
            description=self.description,
            type=self.type,
            content=self.content,
            priority=self.priority,
            enabled=True,
            tags=list(self.tags),
        )


def build_all(templates: tuple[RuleTemplate, ...]) -> list[Rule]:
    return [template.build() for template in templates]


def tech_stack_rule(tech_stacks: list[str]) -> Rule:
    return Rule(
        title="技术栈规范",
        description="项目使用的技术栈和版本要求",
        type=RuleType.TECH_STACK,
        content=f"技术栈: {', '.join(tech_stacks)}",
        priority=5,
        enabled=True,
        tags=["tech", "stack"],
    )


PROJECT_FALLBACK: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "代码规范",
        "项目代码编写规范和要求",
        RuleType.CODE_STYLE,
        "函数命名采用 snake_case，每行代码不超过 80 字符",
        4,
        ("code", "style", "naming"),
    ),
    RuleTemplate(
        "安全约束",
        "项目安全相关的要求和约束",
        RuleType.SECURITY,
        "敏感数据（如密码）需加密存储",
        5,
        ("security", "encryption"),
    ),
)

GLOBAL_BASELINE: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "通用命名规范",
        "适用于所有项目的通用命名规范",
        RuleType.NAMING,
        "变量和函数名应具有描述性，避免使用缩写",
        3,
        ("naming", "general"),
    ),
    RuleTemplate(
        "代码注释规范",
        "代码注释的编写规范",
        RuleType.DOCUMENTATION,
        "所有公共函数和复杂逻辑都应添加注释",
        3,
        ("documentation", "comments"),
    ),
    RuleTemplate(
        "错误处理规范",
        "错误处理的标准做法",
        RuleType.ERROR_HANDLING,
        "所有可能失败的操作都应进行错误处理",
        4,
        ("error", "handling"),
    ),
)

PHP_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "PHP安全规范",
        "PHP开发中的安全注意事项和规避规则",
        RuleType.SECURITY,
        "使用 PDO 预处理语句防止 SQL 注入，验证所有用户输入，使用 password_hash() 加密密码",
        5,
        ("security", "php", "sql-injection"),
    ),
    RuleTemplate(
        "PHP性能优化",
        "PHP性能优化的关键规则",
        RuleType.PERFORMANCE,
        "启用 OPcache，使用 Composer 自动加载，避免在循环中执行数据库查询",
        4,
        ("performance", "php", "optimization"),
    ),
)

LARAVEL_RULE = RuleTemplate(
    "Laravel最佳实践",
    "Laravel框架开发的最佳实践",
    RuleType.FRAMEWORK,
    "使用 Eloquent ORM，遵循 MVC 模式，使用 Artisan 命令，启用 CSRF 保护",
    4,
    ("framework", "laravel", "best-practices"),
)

GO_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "Go代码规范",
        "Go语言开发的标准规范",
        RuleType.CODE_STYLE,
        "使用 gofmt 格式化代码，遵循 Go 官方命名约定，使用 go mod 管理依赖",
        4,
        ("code_style", "go", "golang"),
    ),
    RuleTemplate(
        "Go错误处理",
        "Go语言错误处理的最佳实践",
        RuleType.ERROR_HANDLING,
        "始终检查错误返回值，使用 errors.Wrap 包装错误，避免忽略错误",
        5,
        ("error_handling", "go", "best-practices"),
    ),
)

JAVA_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "Java代码规范",
        "Java开发的标准规范",
        RuleType.CODE_STYLE,
        "遵循 Java 命名约定，使用 Lombok 减少样板代码，启用代码检查工具",
        4,
        ("code_style", "java", "spring"),
    ),
)

PYTHON_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "Python代码规范",
        "Python开发的标准规范",
        RuleType.CODE_STYLE,
        "遵循 PEP 8 规范，使用类型提示，使用虚拟环境管理依赖",
        4,
        ("code_style", "python", "pep8"),
    ),
)

NODE_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "Node.js安全规范",
        "Node.js开发中的安全注意事项",
        RuleType.SECURITY,
        "使用 helmet 中间件，验证所有输入，使用 bcrypt 加密密码，定期更新依赖",
        5,
        ("security", "nodejs", "express"),
    ),
)

FRONTEND_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "前端安全规范",
        "前端开发中的安全注意事项",
        RuleType.SECURITY,
        "使用 HTTPS，验证用户输入，防止 XSS 攻击，使用 CSP 策略",
        5,
        ("security", "frontend", "xss"),
    ),
)

DATABASE_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "数据库安全规范",
        "数据库操作的安全注意事项",
        RuleType.SECURITY,
        "使用参数化查询防止 SQL 注入，限制数据库用户权限，定期备份数据",
        5,
        ("security", "database", "sql-injection"),
    ),
)

CACHE_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "缓存使用规范",
        "缓存系统使用的最佳实践",
        RuleType.PERFORMANCE,
        "设置合理的过期时间，避免缓存穿透，使用缓存预热，监控缓存命中率",
        4,
        ("performance", "cache", "redis"),
    ),
)

DEVOPS_RULES: tuple[RuleTemplate, ...] = (
    RuleTemplate(
        "容器安全规范",
        "容器化部署的安全注意事项",
        RuleType.SECURITY,
        "使用非 root 用户运行容器，定期更新基础镜像，扫描镜像漏洞，限制容器权限",
        5,
        ("security", "docker", "kubernetes"),
    ),
)


def _php_rules(tech: str) -> list[Rule]:
    rules = build_all(PHP_RULES)
    if "Laravel" in tech:
        rules.append(LARAVEL_RULE.build())
    return rules


@dataclass(frozen=True)
class TechCategory:
    """A technology family recognised by case-sensitive substring match."""

    name: str
    markers: tuple[str, ...]
    rules: Callable[[str], list[Rule]]

    def matches(self, tech: str) -> bool:
        return any(marker in tech for marker in self.markers)


def _fixed(templates: tuple[RuleTemplate, ...]) -> Callable[[str], list[Rule]]:
    return lambda _tech: build_all(templates)


# Order matters: "Go" is checked before "Java", so the first hit wins per tech string.
TECH_CATEGORIES: tuple[TechCategory, ...] = (
    TechCategory("php", ("PHP",), _php_rules),
    TechCategory("go", ("Go",), _fixed(GO_RULES)),
    TechCategory("java", ("Java",), _fixed(JAVA_RULES)),
    TechCategory("python", ("Python",), _fixed(PYTHON_RULES)),
    TechCategory("nodejs", ("Node.js",), _fixed(NODE_RULES)),
    TechCategory("frontend", ("React", "Vue"), _fixed(FRONTEND_RULES)),
    TechCategory("database", ("MySQL", "PostgreSQL"), _fixed(DATABASE_RULES)),
    TechCategory("cache", ("Redis", "Memcached"), _fixed(CACHE_RULES)),
    TechCategory("devops", ("Docker", "Kubernetes"), _fixed(DEVOPS_RULES)),
)


def tech_category(tech: str) -> TechCategory | None:
    for category in TECH_CATEGORIES:
        if category.matches(tech):
            return category
    return None


def tech_specific_rules(tech_stacks: list[str]) -> list[Rule]:
    rules: list[Rule] = []
    for tech in tech_stacks:
        category = tech_category(tech)
        if category is not None:
            rules.extend(category.rules(tech))
    return rules
