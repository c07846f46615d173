"""Starter global rule bundles written by ``init``, one file per tech family.

Each bundle uses ``## `` sections with ``- `` bullets so the global rule
parser can read it back.
"""

from typing import Final

from pf_ruler.rules.catalog import tech_category


BUNDLES: Final[dict[str, list[str]]] = {
    "php": [
        "# PHP 开发规范与最佳实践",
        "",
        "## 基础规则",
        "- 遵循 PSR-12 代码规范",
        "- 所有 PHP 文件必须以 <?php 开头，不使用关闭标签 ?>",
        "- 使用 4 个空格缩进，不使用 Tab",
        "- 行宽不超过 120 字符",
        "",
        "## 文件组织",
        "- 类名与文件名保持一致，使用 PascalCase",
        "- 函数名与方法名使用 camelCase",
        "- 常量名使用全大写加下划线",
        "- 目录结构遵循 PSR-4 自动加载标准",
        "",
        "## 注释与文档",
        "- 公共方法必须写 PHPDoc，包括 @param 和 @return",
        "- 代码逻辑复杂处需要行内注释",
        "",
        "## 安全与实践",
        "- 避免使用 mysql_*，统一使用 PDO 或框架自带的数据库层",
        "- 避免硬编码敏感信息，使用配置文件或环境变量",
        "- 异常处理要用 try/catch，不允许裸 die/exit",
        "",
        "## 测试",
        "- 所有新类必须配套 PHPUnit 单元测试",
        "- 测试文件放在 tests/ 目录下",
    ],
    "go": [
        "# Go 开发规范与最佳实践",
        "",
        "## 代码规范",
        "- 使用 gofmt 格式化代码",
        "- 遵循 Go 官方命名约定",
        "- 使用 go mod 管理依赖",
        "- 包名使用小写字母",
        "- 接口名以 er 结尾",
        "",
        "## 错误处理",
        "- 始终检查错误返回值",
        "- 使用 errors.Wrap 包装错误",
        "- 避免忽略错误",
        "- 自定义错误类型实现 Error() 方法",
        "",
        "## 性能优化",
        "- 使用 sync.Pool 复用对象",
        "- 避免在循环中分配内存",
        "- 使用 strings.Builder 进行字符串拼接",
        "- 合理使用 goroutine 和 channel",
    ],
    "java": [
        "# Java 开发规范与最佳实践",
        "",
        "## 代码规范",
        "- 遵循 Java 命名约定",
        "- 使用 Lombok 减少样板代码",
        "- 启用代码检查工具",
        "- 类名使用 PascalCase",
        "- 方法名使用 camelCase",
        "",
        "## Spring Boot 规范",
        "- 使用 Spring Boot 自动配置",
        "- 遵循 RESTful API 设计原则",
        "- 使用 Spring Security 进行安全控制",
        "- 使用 Spring Data JPA 进行数据访问",
    ],
    "python": [
        "# Python 开发规范与最佳实践",
        "",
        "## 代码规范",
        "- 遵循 PEP 8 规范",
        "- 使用类型提示",
        "- 使用虚拟环境管理依赖",
        "- 函数名和变量名使用 snake_case",
        "- 类名使用 PascalCase",
        "",
        "## 最佳实践",
        "- 使用 list comprehension 和 generator",
        "- 使用 with 语句管理资源",
        "- 使用 dataclass 简化类定义",
        "- 编写 docstring 文档",
    ],
    "nodejs": [
        "# Node.js 开发规范与最佳实践",
        "",
        "## 安全规范",
        "- 使用 helmet 中间件",
        "- 验证所有输入",
        "- 使用 bcrypt 加密密码",
        "- 定期更新依赖",
        "- 使用 HTTPS",
        "",
        "## 代码规范",
        "- 使用 ESLint 进行代码检查",
        "- 使用 Prettier 格式化代码",
        "- 遵循异步编程最佳实践",
        "- 使用 async/await 而不是回调",
    ],
    "frontend": [
        "# 前端开发规范与最佳实践",
        "",
        "## 安全规范",
        "- 使用 HTTPS",
        "- 验证用户输入",
        "- 防止 XSS 攻击",
        "- 使用 CSP 策略",
        "- 避免在客户端存储敏感信息",
        "",
        "## 代码规范",
        "- 使用 ESLint 和 Prettier",
        "- 遵循组件化开发原则",
        "- 使用 TypeScript 进行类型检查",
        "- 编写单元测试",
    ],
    "database": [
        "# 数据库开发规范与最佳实践",
        "",
        "## 安全规范",
        "- 使用参数化查询防止 SQL 注入",
        "- 限制数据库用户权限",
        "- 定期备份数据",
        "- 加密敏感数据",
        "",
        "## 性能优化",
        "- 合理设计索引",
        "- 避免 SELECT *",
        "- 使用连接池",
        "- 定期分析慢查询",
    ],
    "cache": [
        "# 缓存使用规范与最佳实践",
        "",
        "## 使用规范",
        "- 设置合理的过期时间",
        "- 避免缓存穿透",
        "- 使用缓存预热",
        "- 监控缓存命中率",
        "",
        "## 注意事项",
        "- 缓存数据一致性",
        "- 缓存雪崩防护",
        "- 合理设置内存限制",
        "- 定期清理过期数据",
    ],
    "devops": [
        "# DevOps 规范与最佳实践",
        "",
        "## 容器安全",
        "- 使用非 root 用户运行容器",
        "- 定期更新基础镜像",
        "- 扫描镜像漏洞",
        "- 限制容器权限",
        "",
        "## 部署规范",
        "- 使用 CI/CD 流水线",
        "- 自动化测试",
        "- 蓝绿部署或金丝雀发布",
        "- 监控和日志收集",
    ],
}

LARAVEL_SECTION: Final[list[str]] = [
    "",
    "## Laravel 特定规范",
    "- 使用 Eloquent ORM 进行数据库操作",
    "- 遵循 MVC 架构模式",
    "- 使用 Artisan 命令生成代码",
    "- 启用 CSRF 保护",
    "- 使用 Laravel 的验证器进行数据验证",
    "- 使用 Laravel 的缓存系统",
]


def bundle_for(tech: str) -> tuple[str, str] | None:
    """Return ``(filename, markdown)`` for a declared tech stack, if recognised."""
    category = tech_category(tech)
    if category is None:
        return None
    lines = list(BUNDLES[category.name])
    if category.name == "php" and "Laravel" in tech:
        lines.extend(LARAVEL_SECTION)
    return f"{category.name}_rules.md", "\n".join(lines)
