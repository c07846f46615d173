from pathlib import Path


class RulerAppError(Exception):
    """Base user-facing application error."""


class RulerFileError(RulerAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(RulerFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidYamlFormatError(RulerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(RulerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class OutputExistsError(RulerFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            path=path, message="Output file already exists, use --force to overwrite"
        )


class RuleLoadError(RulerAppError):
    """A pipeline stage failed; ``stage`` names it, ``cause`` keeps the original error."""

    def __init__(self, stage: str, cause: Exception) -> None:
        self.stage = stage
        self.cause = cause
        super().__init__(f"failed to load {stage}: {cause}")


class UnknownPlatformError(RulerAppError):
    def __init__(self, name: str, supported: list[str]) -> None:
        self.name = name
        self.supported = supported
        listed = ", ".join(supported) if supported else "none"
        super().__init__(f'Unsupported platform "{name}" (supported: {listed})')
