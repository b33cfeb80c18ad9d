from discord_guild.discord.models.emoji import GuildEmoji
from discord_guild.discord.models.enums import (
    DefaultMessageNotificationLevel,
    ExplicitContentFilterLevel,
    GuildFeature,
    MFALevel,
    NSFWLevel,
    PremiumTier,
    RoleFlags,
    SystemChannelFlags,
    VerificationLevel,
)
from discord_guild.discord.models.guild import Guild, GuildUpdate
from discord_guild.discord.models.role import Role, RoleTags, sort_roles


__all__ = [
    "DefaultMessageNotificationLevel",
    "ExplicitContentFilterLevel",
    "Guild",
    "GuildEmoji",
    "GuildFeature",
    "GuildUpdate",
    "MFALevel",
    "NSFWLevel",
    "PremiumTier",
    "Role",
    "RoleFlags",
    "RoleTags",
    "SystemChannelFlags",
    "VerificationLevel",
    "sort_roles",
]
