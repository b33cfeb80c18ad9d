import random
from typing import Any

import pytest


def generate_discord_id() -> str:
    return str(random.randint(100000000000000000, 999999999999999999))


@pytest.fixture(scope="function")
def guild_id() -> str:
    return generate_discord_id()


@pytest.fixture(scope="function")
def role_payload() -> dict[str, Any]:
    return {
        "id": "41771983423143936",
        "name": "WE DEM BOYZZ!!!!!!",
        "color": 3447003,
        "hoist": True,
        "icon": "cf3ced8600b777c9486c6d8d84fb4327",
        "unicode_emoji": None,
        "position": 1,
        "permissions": "66321471",
        "managed": False,
        "mentionable": False,
        "flags": 0,
    }


@pytest.fixture(scope="function")
def emoji_payload() -> dict[str, Any]:
    return {
        "id": "41771983429993937",
        "name": "LUL",
        "roles": ["41771983429993000", "41771983429993111"],
        "require_colons": True,
        "managed": False,
        "animated": False,
        "available": True,
    }


@pytest.fixture(scope="function")
def guild_payload(guild_id: str, role_payload: dict[str, Any], emoji_payload: dict[str, Any]) -> dict[str, Any]:
    everyone = {
        "id": guild_id,
        "name": "@everyone",
        "color": 0,
        "hoist": False,
        "position": 0,
        "permissions": "1071698660929",
        "managed": False,
        "mentionable": False,
        "flags": 0,
    }
    return {
        "id": guild_id,
        "name": "Test Guild",
        "icon": "a_1269e74af4df7417b13759eae50c83dc",
        "icon_hash": None,
        "splash": None,
        "discovery_splash": None,
        "banner": "5e4a1b3f2c2d4e5f6a7b8c9d0e1f2a3b",
        "description": None,
        "owner_id": "73193882359173120",
        "application_id": None,
        "afk_channel_id": None,
        "afk_timeout": 300,
        "widget_enabled": False,
        "widget_channel_id": None,
        "system_channel_id": "41771983444644352",
        "system_channel_flags": 5,
        "rules_channel_id": None,
        "public_updates_channel_id": None,
        "safety_alerts_channel_id": None,
        "verification_level": 1,
        "default_message_notifications": 0,
        "explicit_content_filter": 2,
        "mfa_level": 0,
        "premium_tier": 2,
        "nsfw_level": 0,
        "max_presences": None,
        "max_members": 500000,
        "max_video_channel_users": 25,
        "vanity_url_code": None,
        "premium_subscription_count": 9,
        "premium_progress_bar_enabled": False,
        "preferred_locale": "en-US",
        "roles": [role_payload, everyone],
        "emojis": [emoji_payload],
        "features": ["ANIMATED_ICON", "COMMUNITY", "NEWS"],
    }
