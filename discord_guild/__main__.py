import asyncio
import logging

from discord_guild.core.config import get_config
from discord_guild.discord import DiscordError, DiscordGuildClient


logger = logging.getLogger("discord_guild")


async def main() -> int:
    config = get_config()
    logger.info("Starting %s %s", config.general.name, config.general.version)
    config.general.log_defaults()
    config.discord.log_defaults()

    try:
        client = DiscordGuildClient.from_config(config.discord)
        guild = await client.fetch_guild(with_counts=True)
    except (DiscordError, ValueError):
        logger.exception("Could not fetch guild %s", config.discord.guild_id)
        return 1

    print(guild.model_dump_json(indent=2, exclude_unset=True))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=get_config().general.log_level)
    raise SystemExit(asyncio.run(main()))
