from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from discord_guild.core.typing import JSONObject, Snowflake
from discord_guild.discord.cdn import (
    ImageFormat,
    guild_banner_url,
    guild_discovery_splash_url,
    guild_icon_url,
    guild_splash_url,
)
from discord_guild.discord.models.emoji import GuildEmoji
from discord_guild.discord.models.enums import (
    DefaultMessageNotificationLevel,
    ExplicitContentFilterLevel,
    GuildFeature,
    MFALevel,
    NSFWLevel,
    PremiumTier,
    SystemChannelFlags,
    VerificationLevel,
)
from discord_guild.discord.models.role import Role, sort_roles


GUILD_NAME_MIN_LENGTH = 2
GUILD_NAME_MAX_LENGTH = 100


def validate_guild_name(value: str) -> str:
    length = len(value.strip())
    if not GUILD_NAME_MIN_LENGTH <= length <= GUILD_NAME_MAX_LENGTH:
        raise ValueError(
            f"Guild name must be {GUILD_NAME_MIN_LENGTH}-{GUILD_NAME_MAX_LENGTH} characters "
            f"excluding surrounding whitespace, got {length}"
        )
    return value


GuildName = Annotated[str, AfterValidator(validate_guild_name)]

# Image hashes, not URLs. See `discord_guild.discord.cdn`.
IconHash = str
SplashHash = str
BannerHash = str

AfkTimeout = Literal[60, 300, 900, 1800, 3600]


class Guild(BaseModel):
    """
    An isolated collection of users and channels, often referred to as a "server" in the UI.

    Optional fields are either absent or null depending on the context the guild
    was fetched in. Use `model_fields_set` to tell the two apart.

    @link https://discord.com/developers/docs/resources/guild#guild-object
    """

    model_config = ConfigDict(extra="allow")

    id: Snowflake
    name: GuildName
    icon: IconHash | None = None
    icon_hash: IconHash | None = None
    splash: SplashHash | None = None
    discovery_splash: SplashHash | None = None
    banner: BannerHash | None = None
    description: str | None = None

    owner_id: Snowflake
    application_id: Snowflake | None = None
    region: str | None = Field(default=None, deprecated="Region is no longer used by Discord.")

    afk_channel_id: Snowflake | None
    afk_timeout: int = Field(ge=0)
    widget_enabled: bool | None = None
    widget_channel_id: Snowflake | None = None
    system_channel_id: Snowflake | None
    system_channel_flags: int = Field(ge=0)
    rules_channel_id: Snowflake | None = None
    public_updates_channel_id: Snowflake | None = None
    safety_alerts_channel_id: Snowflake | None = None

    verification_level: VerificationLevel
    default_message_notifications: DefaultMessageNotificationLevel
    explicit_content_filter: ExplicitContentFilterLevel
    mfa_level: MFALevel
    premium_tier: PremiumTier
    nsfw_level: NSFWLevel = NSFWLevel.DEFAULT

    max_presences: int | None = None
    max_members: int | None = None
    max_video_channel_users: int | None = None
    max_stage_video_channel_users: int | None = None
    vanity_url_code: str | None = None
    premium_subscription_count: int | None = None
    premium_progress_bar_enabled: bool | None = None
    preferred_locale: str

    # Only present when fetched with `with_counts=true`
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None

    roles: list[Role]
    emojis: list[GuildEmoji]
    features: list[GuildFeature]

    @property
    def system_channel_settings(self) -> SystemChannelFlags:
        return SystemChannelFlags(self.system_channel_flags)

    @property
    def sorted_roles(self) -> list[Role]:
        return sort_roles(self.roles)

    @property
    def default_role(self) -> Role | None:
        """The `@everyone` role."""
        return self.get_role(self.id)

    def get_role(self, role_id: str) -> Role | None:
        return next((role for role in self.roles if role.id == role_id), None)

    def get_emoji(self, emoji_id: str) -> GuildEmoji | None:
        return next((emoji for emoji in self.emojis if emoji.id == emoji_id), None)

    def has_feature(self, feature: GuildFeature) -> bool:
        return feature in self.features

    def icon_url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str | None:
        return guild_icon_url(self.id, self.icon, fmt, size) if self.icon else None

    def splash_url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str | None:
        return guild_splash_url(self.id, self.splash, fmt, size) if self.splash else None

    def discovery_splash_url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str | None:
        if not self.discovery_splash:
            return None
        return guild_discovery_splash_url(self.id, self.discovery_splash, fmt, size)

    def banner_url(self, fmt: ImageFormat | None = None, size: int | None = None) -> str | None:
        return guild_banner_url(self.id, self.banner, fmt, size) if self.banner else None


class GuildUpdate(BaseModel):
    """
    Partial guild attributes for a Modify Guild request.

    Only attributes that were explicitly set, including explicit `None`, are sent.
    Keys outside this model are passed through to Discord unchanged.

    @link https://discord.com/developers/docs/resources/guild#modify-guild
    """

    model_config = ConfigDict(extra="allow")

    name: GuildName | None = None
    region: str | None = None
    verification_level: VerificationLevel | None = None
    default_message_notifications: DefaultMessageNotificationLevel | None = None
    explicit_content_filter: ExplicitContentFilterLevel | None = None
    afk_channel_id: Snowflake | None = None
    afk_timeout: AfkTimeout | None = None
    # icon, splash, discovery_splash and banner take base64 image data URIs on upload
    icon: str | None = None
    owner_id: Snowflake | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    banner: str | None = None
    system_channel_id: Snowflake | None = None
    system_channel_flags: int | None = Field(default=None, ge=0)
    rules_channel_id: Snowflake | None = None
    public_updates_channel_id: Snowflake | None = None
    preferred_locale: str | None = None
    features: list[GuildFeature] | None = None
    description: str | None = None
    premium_progress_bar_enabled: bool | None = None
    safety_alerts_channel_id: Snowflake | None = None

    def to_payload(self) -> JSONObject:
        return self.model_dump(mode="json", exclude_unset=True)
