from discord_guild.discord import DiscordGuildClient
from discord_guild.discord.models import Guild, GuildUpdate


__all__ = ["DiscordGuildClient", "Guild", "GuildUpdate"]
