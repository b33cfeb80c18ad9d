from discord_guild.discord.client import DiscordGuildClient
from discord_guild.discord.exceptions import (
    AuthError,
    DiscordError,
    HTTPError,
    InvalidRequestError,
    MissingPermissionsError,
    NotFoundError,
    RateLimitedError,
    SchemaError,
    TransportError,
)


__all__ = [
    "AuthError",
    "DiscordError",
    "DiscordGuildClient",
    "HTTPError",
    "InvalidRequestError",
    "MissingPermissionsError",
    "NotFoundError",
    "RateLimitedError",
    "SchemaError",
    "TransportError",
]
