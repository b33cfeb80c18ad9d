from pydantic import BaseModel, ConfigDict

from discord_guild.core.typing import Snowflake
from discord_guild.discord.cdn import ImageFormat, emoji_url


class GuildEmoji(BaseModel):
    """@link https://discord.com/developers/docs/resources/emoji#emoji-object"""

    model_config = ConfigDict(extra="allow")

    id: Snowflake
    # Can be null only in reaction emoji objects
    name: str | None = None
    roles: list[Snowflake]
    require_colons: bool
    managed: bool
    animated: bool
    available: bool

    @property
    def is_restricted(self) -> bool:
        """Whether only members with one of `roles` may use this emoji."""
        return bool(self.roles)

    def url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str:
        return emoji_url(self.id, self.animated, fmt, size)
