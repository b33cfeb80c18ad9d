from pydantic import BaseModel, ConfigDict, Field

from discord_guild.core.typing import DIGITS_PATTERN, Snowflake
from discord_guild.discord.cdn import ImageFormat, role_icon_url
from discord_guild.discord.models.enums import RoleFlags


class RoleTags(BaseModel):
    """
    Metadata about special role ownership.

    Tags with type null represent booleans. They are present and set to null
    if they are "true", and are not present if they are "false".

    @link https://discord.com/developers/docs/topics/permissions#role-object-role-tags-structure
    """

    model_config = ConfigDict(extra="allow")

    bot_id: Snowflake | None = None
    integration_id: Snowflake | None = None
    premium_subscriber: None = None
    subscription_listing_id: Snowflake | None = None
    available_for_purchase: None = None
    guild_connections: None = None

    @property
    def is_bot_managed(self) -> bool:
        return self.bot_id is not None

    @property
    def is_integration(self) -> bool:
        return self.integration_id is not None

    @property
    def is_premium_subscriber(self) -> bool:
        """Whether this is the guild's booster role."""
        return "premium_subscriber" in self.model_fields_set

    @property
    def is_available_for_purchase(self) -> bool:
        return "available_for_purchase" in self.model_fields_set

    @property
    def is_guild_connection(self) -> bool:
        """Whether this is a linked role."""
        return "guild_connections" in self.model_fields_set


class Role(BaseModel):
    """
    A set of permissions attached to a group of users.

    The `@everyone` role has the same ID as the guild it belongs to.

    @link https://discord.com/developers/docs/topics/permissions#role-object
    """

    model_config = ConfigDict(extra="allow")

    id: Snowflake
    name: str
    color: int = Field(ge=0)
    hoist: bool
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int
    # Kept as a string: the bitfield does not fit into 53 bits
    permissions: str = Field(pattern=DIGITS_PATTERN)
    managed: bool
    mentionable: bool
    tags: RoleTags | None = None
    flags: int = Field(default=0, ge=0)

    @property
    def permission_value(self) -> int:
        return int(self.permissions)

    def has_permission(self, permission: int) -> bool:
        return self.permission_value & permission == permission

    @property
    def role_flags(self) -> RoleFlags:
        return RoleFlags(self.flags)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Roles with the same position are ordered by ID."""
        return self.position, int(self.id)

    def icon_url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str | None:
        if self.icon is None:
            return None
        return role_icon_url(self.id, self.icon, fmt, size)


def sort_roles(roles: list[Role]) -> list[Role]:
    return sorted(roles, key=lambda role: role.sort_key)
