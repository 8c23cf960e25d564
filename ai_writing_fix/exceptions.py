class AiFixError(Exception):
    """Base class for fatal errors reported by the CLI."""


class TargetNotFoundError(AiFixError):
    pass


class ConfigError(AiFixError):
    pass


class TextlintError(AiFixError):
    """textlint could not be run or produced unreadable output."""


class EngineResultMissingError(AiFixError):
    pass
