from typing import Final


RULER_DIRNAME: Final[str] = ".ruler"
PROJECT_DIRNAME: Final[str] = "project"
GLOBAL_DIRNAME: Final[str] = "global"
TEMPLATES_DIRNAME: Final[str] = "templates"

REQUIREMENTS_FILENAME: Final[str] = "requirements.md"
TECH_STACK_FILENAME: Final[str] = "tech_stack.yaml"
CONFIG_FILENAME: Final[str] = "config.yaml"
GITIGNORE_FILENAME: Final[str] = ".gitignore"
GITIGNORE_ENTRY: Final[str] = ".ruler/"

RULESET_VERSION: Final[str] = "1.0.0"
UNKNOWN_PROJECT_NAME: Final[str] = "未知项目"
DEFAULT_PLATFORM: Final[str] = "trae"

TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

TECH_STACK_OPTIONS: Final[tuple[str, ...]] = (
    "Go+Gin",
    "PHP+Laravel",
    "PHP+ThinkPHP",
    "PHP+Slim",
    "React+TypeScript",
    "Vue.js",
    "Java+SpringBoot",
    "Python+Django",
    "Python+Flask",
    "Node.js+Express",
    "Node.js+Koa",
    "MySQL",
    "PostgreSQL",
    "MongoDB",
    "Redis",
    "Memcached",
    "JWT",
    "OAuth2",
    "Docker",
    "Kubernetes",
)

AI_EDITOR_OPTIONS: Final[tuple[str, ...]] = (
    "Trae",
    "Cursor",
    "GitHub Copilot X",
)

AGENTS_FILENAME: Final[str] = "AGENTS.md"
