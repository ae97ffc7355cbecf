"""Custom exception hierarchy for the WXWork robot."""


class WXWorkRobotError(Exception):
    """Base error type."""


class ConfigError(WXWorkRobotError):
    pass


class ExecutorError(WXWorkRobotError):
    """Raised by spawn/http backends when a command cannot be executed."""
