# pyright: reportUnknownMemberType = false
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import ClassVar, Self

import aiohttp
from fastapi import status
from pydantic import ValidationError

from discord_guild.core.config import DiscordConfig, get_config
from discord_guild.core.typing import JSONAny, JSONObject
from discord_guild.discord.exceptions import (
    AuthError,
    HTTPError,
    InvalidRequestError,
    MissingPermissionsError,
    NotFoundError,
    RateLimitedError,
    SchemaError,
    TransportError,
)
from discord_guild.discord.models import Guild, GuildUpdate


DISCORD_URL = "https://discord.com"
DISCORD_API_URL = f"{DISCORD_URL}/api/v10"
AUDIT_LOG_REASON_HEADER = "X-Audit-Log-Reason"


class DiscordGuildClient:
    """
    Client for a single Discord guild, authenticated as a bot.

    Every call is a single request with a single response: no caching, retries
    or rate limit handling. Failures are raised as `DiscordError` subclasses.
    """

    logger: ClassVar[logging.Logger] = logging.getLogger(__name__)

    ERRORS_BY_STATUS: ClassVar[dict[int, type[HTTPError]]] = {
        status.HTTP_400_BAD_REQUEST: InvalidRequestError,
        status.HTTP_401_UNAUTHORIZED: AuthError,
        status.HTTP_403_FORBIDDEN: MissingPermissionsError,
        status.HTTP_404_NOT_FOUND: NotFoundError,
    }

    def __init__(
        self,
        token: str,
        guild_id: str,
        api_url: str = DISCORD_API_URL,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """
        Initialize the guild client.

        Args:
            token: Discord bot token.
            guild_id: ID of the guild this client reads and modifies.
            api_url: Base URL of the Discord REST API.
            timeout: Total request timeout in seconds, None for aiohttp's default.
            session: Session to send requests with. A new session is opened per request when omitted.
        """
        self.token: str = token
        self.guild_id: str = guild_id
        self.api_url: str = api_url.rstrip("/")
        self.timeout: aiohttp.ClientTimeout | None = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self.session: aiohttp.ClientSession | None = session

    @classmethod
    def from_config(cls, config: DiscordConfig | None = None, session: aiohttp.ClientSession | None = None) -> Self:
        """
        Create a client from application configuration.

        Returns:
            Configured client instance
        """
        config = config or get_config().discord
        if not config.bot_token:
            raise ValueError("Discord bot token not configured")
        return cls(
            token=config.bot_token,
            guild_id=config.guild_id,
            api_url=config.api_url,
            timeout=config.request_timeout,
            session=session,
        )

    @property
    def guild_url(self) -> str:
        return f"{self.api_url}/guilds/{self.guild_id}"

    @property
    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bot {self.token}"}

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self.session is not None:
            yield self.session
            return
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            yield session

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, str] | None = None,
        json: JSONObject | None = None,
        headers: dict[str, str] | None = None,
    ) -> JSONAny:
        """
        Send a request authenticated with the bot token and return the decoded body.

        Raises:
            TransportError: If no response was received.
            HTTPError: If Discord answered with a non-2xx status.
            SchemaError: If a successful response has a body that is not JSON.
        """
        request_headers = {**self.auth_headers, **(headers or {})}
        # Per request so that an injected session honours the configured timeout too
        timeout_kwargs = {"timeout": self.timeout} if self.timeout is not None else {}
        self.logger.debug("%s %s params=%s", method, url, params)
        try:
            async with self._session() as session:
                resp = await session.request(
                    method, url, params=params, json=json, headers=request_headers, **timeout_kwargs
                )
                data = await self._read_json(resp)
        except (aiohttp.ClientError, TimeoutError) as e:
            self.logger.error(f"Request {method} {url} failed: {e!r}")
            raise TransportError(method, url, str(e) or type(e).__name__) from e

        self._raise_for_status(resp.status, data, dict(resp.headers))
        return data

    @staticmethod
    async def _read_json(resp: aiohttp.ClientResponse) -> JSONAny:
        try:
            return await resp.json(content_type=None)
        except ValueError as e:
            # Error pages from proxies are not JSON, the status still tells what happened
            if resp.status >= status.HTTP_400_BAD_REQUEST:
                return None
            raise SchemaError(f"Response body is not valid JSON: {e}") from e

    def _raise_for_status(self, status_code: int, data: JSONAny, headers: dict[str, str]) -> None:
        if status_code < status.HTTP_400_BAD_REQUEST:
            return
        self.logger.warning("Discord responded with %s: %s", status_code, data)
        if status_code == status.HTTP_429_TOO_MANY_REQUESTS:
            raise RateLimitedError(status_code, data, headers)
        raise self.ERRORS_BY_STATUS.get(status_code, HTTPError)(status_code, data)

    def _parse_guild(self, data: JSONAny) -> Guild:
        try:
            return Guild.model_validate(data)
        except ValidationError as e:
            self.logger.error("Guild %s response does not match the schema: %s", self.guild_id, e)
            raise SchemaError(f"Invalid guild response from Discord API ({e.error_count()} errors)", e) from e

    async def fetch_guild(self, with_counts: bool = False) -> Guild:
        """
        Return the guild object.

        If `with_counts` is true, `approximate_member_count` and
        `approximate_presence_count` are filled in as well.

        @link https://discord.com/developers/docs/resources/guild#get-guild
        """
        params = {"with_counts": "true" if with_counts else "false"}
        data = await self.request("GET", self.guild_url, params=params)
        return self._parse_guild(data)

    async def update_guild(self, guild: GuildUpdate | JSONObject, audit_log_reason: str | None = None) -> Guild:
        """
        Modify the guild's settings and return the updated guild.

        Requires the MANAGE_GUILD permission. Only explicitly set attributes are sent.
        The audit log reason goes in the `X-Audit-Log-Reason` header, never in the body,
        and the header is left out entirely when no reason is given.

        @link https://discord.com/developers/docs/resources/guild#modify-guild
        """
        if not isinstance(guild, GuildUpdate):
            guild = GuildUpdate.model_validate(guild)

        headers = {AUDIT_LOG_REASON_HEADER: audit_log_reason} if audit_log_reason else None
        data = await self.request("PATCH", self.guild_url, json=guild.to_payload(), headers=headers)
        return self._parse_guild(data)
