from pydantic import ValidationError

from discord_guild.core.typing import JSONAny


class DiscordError(Exception):
    """Base class for every failure surfaced by the guild client."""


class TransportError(DiscordError):
    """A Exception raised when the request never produced an HTTP response."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method: str = method
        self.url: str = url
        self.reason: str = reason
        super().__init__(f"{method} {url} failed: {reason}")


class SchemaError(DiscordError):
    """A Exception raised when a response body does not match the expected shape."""

    def __init__(self, message: str, errors: ValidationError | None = None) -> None:
        self.message: str = message
        self.errors: ValidationError | None = errors
        super().__init__(message)


class HTTPError(DiscordError):
    """A Exception raised when Discord answers with a non-2xx status."""

    def __init__(self, status: int, json: JSONAny) -> None:
        self.status: int = status
        self.json: JSONAny = json
        body = json if isinstance(json, dict) else {}
        self.code: int = body.get("code", 0)
        self.message: str = body.get("message", "")
        super().__init__(f"{status} {self.message}".rstrip())


class InvalidRequestError(HTTPError):
    """A Exception raised when a Request is not Valid."""


class AuthError(HTTPError):
    """A Exception raised when the bot token is rejected."""


class MissingPermissionsError(HTTPError):
    """A Exception raised when the bot lacks the permission for the action."""


class NotFoundError(HTTPError):
    """A Exception raised when the guild does not exist or is not visible to the bot."""


class RateLimitedError(HTTPError):
    """A Exception raised when Discord rate limits the request."""

    def __init__(self, status: int, json: JSONAny, headers: dict[str, str]) -> None:
        super().__init__(status, json)
        self.headers: dict[str, str] = headers
        body = json if isinstance(json, dict) else {}
        self.retry_after: float = body.get("retry_after", 0.0)
        self.is_global: bool = body.get("global", False)
