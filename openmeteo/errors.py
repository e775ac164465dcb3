"""Exception hierarchy mapped onto process exit codes."""


class OpenMeteoError(Exception):
    exit_code = 1

    def messages(self) -> list[str]:
        return [str(self)]


class UsageError(OpenMeteoError):
    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.command = command


class ConfigError(UsageError):
    pass


class ValidationError(OpenMeteoError):
    """One or more invalid inputs, reported together."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)

    def messages(self) -> list[str]:
        return list(self.errors)


class ResolutionError(OpenMeteoError):
    pass


class NetworkError(OpenMeteoError):
    exit_code = 2


class UpstreamError(OpenMeteoError):
    exit_code = 2

    def __init__(self, status_code: int | None, reason: str):
        super().__init__(f"API error (HTTP {status_code}): {reason}")
        self.status_code = status_code
        self.reason = reason


class MalformedResponseError(UpstreamError):
    def __init__(self, detail: str):
        OpenMeteoError.__init__(self, f"malformed response: {detail}")
        self.status_code = None
        self.reason = detail
