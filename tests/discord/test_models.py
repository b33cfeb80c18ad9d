import enum
from datetime import date
from typing import Any

import pytest
from discord_guild.discord.models import (
    Guild,
    GuildEmoji,
    GuildFeature,
    GuildUpdate,
    NSFWLevel,
    Role,
    RoleFlags,
    RoleTags,
    SystemChannelFlags,
    VerificationLevel,
    sort_roles,
)
from pydantic import ValidationError


class TestRoleTags:
    def test_null_valued_tag_means_true(self) -> None:
        tags = RoleTags.model_validate({"premium_subscriber": None})

        assert tags.is_premium_subscriber is True
        assert tags.is_available_for_purchase is False
        assert tags.is_guild_connection is False

    def test_absent_tag_means_false(self) -> None:
        tags = RoleTags.model_validate({})

        assert tags.is_premium_subscriber is False
        assert tags.model_dump(exclude_unset=True) == {}

    def test_tags_roundtrip_keeps_presence(self) -> None:
        payload = {"integration_id": "1234", "available_for_purchase": None, "guild_connections": None}

        tags = RoleTags.model_validate(payload)

        assert tags.is_integration is True
        assert tags.is_bot_managed is False
        assert tags.is_available_for_purchase is True
        assert tags.is_guild_connection is True
        assert tags.model_dump(exclude_unset=True) == payload

    def test_tag_with_value_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RoleTags.model_validate({"premium_subscriber": True})


class TestRole:
    def test_parse(self, role_payload: dict[str, Any]) -> None:
        role_payload["tags"] = {"bot_id": "9876543210"}

        role = Role.model_validate(role_payload)

        assert role.permission_value == 66321471
        assert role.tags is not None
        assert role.tags.is_bot_managed is True
        assert role.role_flags == RoleFlags(0)

    def test_permissions_beyond_53_bits(self, role_payload: dict[str, Any]) -> None:
        role_payload["permissions"] = str((1 << 60) | 8)

        role = Role.model_validate(role_payload)

        assert role.permission_value == (1 << 60) | 8
        assert role.has_permission(8) is True
        assert role.has_permission(1 << 59) is False

    def test_permissions_must_be_numeric(self, role_payload: dict[str, Any]) -> None:
        role_payload["permissions"] = "ADMINISTRATOR"

        with pytest.raises(ValidationError):
            Role.model_validate(role_payload)

    def test_permissions_must_be_ascii_digits(self, role_payload: dict[str, Any]) -> None:
        role_payload["permissions"] = "8²"

        with pytest.raises(ValidationError):
            Role.model_validate(role_payload)

    def test_sort_by_position_then_id(self, role_payload: dict[str, Any]) -> None:
        first = Role.model_validate(role_payload | {"id": "200", "position": 1})
        second = Role.model_validate(role_payload | {"id": "1000", "position": 1})
        top = Role.model_validate(role_payload | {"id": "5", "position": 3})
        bottom = Role.model_validate(role_payload | {"id": "999", "position": 0})

        assert sort_roles([top, second, first, bottom]) == [bottom, first, second, top]

    def test_icon_url(self, role_payload: dict[str, Any]) -> None:
        role = Role.model_validate(role_payload)

        assert role.icon_url(size=64) == (
            "https://cdn.discordapp.com/role-icons/41771983423143936/cf3ced8600b777c9486c6d8d84fb4327.png?size=64"
        )
        assert Role.model_validate(role_payload | {"icon": None}).icon_url() is None


class TestGuildEmoji:
    def test_parse(self, emoji_payload: dict[str, Any]) -> None:
        emoji = GuildEmoji.model_validate(emoji_payload)

        assert emoji.is_restricted is True
        assert emoji.url() == "https://cdn.discordapp.com/emojis/41771983429993937.png"

    def test_nullable_name(self, emoji_payload: dict[str, Any]) -> None:
        emoji = GuildEmoji.model_validate(emoji_payload | {"name": None})

        assert emoji.name is None
        assert "name" in emoji.model_fields_set


class TestGuild:
    def test_parse(self, guild_payload: dict[str, Any], guild_id: str) -> None:
        guild = Guild.model_validate(guild_payload)

        assert guild.verification_level is VerificationLevel.LOW
        assert guild.nsfw_level is NSFWLevel.DEFAULT
        assert guild.features == [GuildFeature.ANIMATED_ICON, GuildFeature.COMMUNITY, GuildFeature.NEWS]
        assert guild.has_feature(GuildFeature.COMMUNITY) is True
        assert guild.has_feature(GuildFeature.VANITY_URL) is False
        assert guild.system_channel_settings == (
            SystemChannelFlags.SUPPRESS_JOIN_NOTIFICATIONS | SystemChannelFlags.SUPPRESS_GUILD_REMINDER_NOTIFICATIONS
        )
        assert guild.default_role is not None
        assert guild.default_role.name == "@everyone"
        assert [role.id for role in guild.sorted_roles] == [guild_id, "41771983423143936"]
        assert guild.get_emoji("41771983429993937") is not None
        assert guild.get_role("1") is None

    def test_absent_and_null_are_distinct(self, guild_payload: dict[str, Any]) -> None:
        del guild_payload["rules_channel_id"]

        guild = Guild.model_validate(guild_payload)

        assert guild.rules_channel_id is None
        assert guild.public_updates_channel_id is None
        assert "rules_channel_id" not in guild.model_fields_set
        assert "public_updates_channel_id" in guild.model_fields_set

        dumped = guild.model_dump(mode="json", exclude_unset=True)
        assert "rules_channel_id" not in dumped
        assert dumped["public_updates_channel_id"] is None

    def test_unknown_fields_are_kept(self, guild_payload: dict[str, Any]) -> None:
        guild_payload["home_header"] = None
        guild_payload["incidents_data"] = {"raid_detected_at": None}

        guild = Guild.model_validate(guild_payload)

        assert guild.model_extra == {"home_header": None, "incidents_data": {"raid_detected_at": None}}

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("verification_level", 5),
            ("default_message_notifications", 2),
            ("mfa_level", -1),
            ("explicit_content_filter", 3),
            ("premium_tier", 4),
            ("nsfw_level", 4),
        ],
    )
    def test_enum_outside_closed_set(self, guild_payload: dict[str, Any], field: str, value: int) -> None:
        guild_payload[field] = value

        with pytest.raises(ValidationError):
            Guild.model_validate(guild_payload)

    def test_unknown_feature(self, guild_payload: dict[str, Any]) -> None:
        guild_payload["features"] = ["COMMUNITY", "TOTALLY_MADE_UP"]

        with pytest.raises(ValidationError):
            Guild.model_validate(guild_payload)

    def test_community_guild_features(self, guild_payload: dict[str, Any]) -> None:
        features = [
            "AUTO_MODERATION",
            "COMMUNITY",
            "ENHANCED_ROLE_COLORS",
            "GUILD_ONBOARDING",
            "GUILD_ONBOARDING_EVER_ENABLED",
            "GUILD_ONBOARDING_HAS_PROMPTS",
            "GUILD_SERVER_GUIDE",
            "GUILD_TAGS",
            "MEMBER_VERIFICATION_GATE_ENABLED",
            "NEWS",
            "PREVIEW_ENABLED",
            "WELCOME_SCREEN_ENABLED",
        ]

        guild = Guild.model_validate(guild_payload | {"features": features})

        assert guild.features == [GuildFeature(feature) for feature in features]
        assert guild.has_feature(GuildFeature.GUILD_ONBOARDING) is True

    @pytest.mark.parametrize("field", ["id", "owner_id"])
    def test_snowflake_rejects_non_ascii_digits(self, guild_payload: dict[str, Any], field: str) -> None:
        with pytest.raises(ValidationError):
            Guild.model_validate(guild_payload | {field: "12²"})

    @pytest.mark.parametrize("name", ["ab", "  ab  ", "x" * 100])
    def test_name_length_accepted(self, guild_payload: dict[str, Any], name: str) -> None:
        guild = Guild.model_validate(guild_payload | {"name": name})

        assert guild.name == name

    @pytest.mark.parametrize("name", ["a", "   a   ", "", "x" * 101])
    def test_name_length_rejected(self, guild_payload: dict[str, Any], name: str) -> None:
        with pytest.raises(ValidationError):
            Guild.model_validate(guild_payload | {"name": name})

    def test_image_urls(self, guild_payload: dict[str, Any], guild_id: str) -> None:
        guild = Guild.model_validate(guild_payload)

        assert guild.icon_url() == (
            f"https://cdn.discordapp.com/icons/{guild_id}/a_1269e74af4df7417b13759eae50c83dc.gif"
        )
        assert guild.banner_url(fmt="webp", size=1024) == (
            f"https://cdn.discordapp.com/banners/{guild_id}/5e4a1b3f2c2d4e5f6a7b8c9d0e1f2a3b.webp?size=1024"
        )
        assert guild.splash_url() is None
        assert guild.discovery_splash_url() is None

    def test_missing_required_field(self, guild_payload: dict[str, Any]) -> None:
        del guild_payload["owner_id"]

        with pytest.raises(ValidationError):
            Guild.model_validate(guild_payload)


class TestGuildUpdate:
    def test_only_set_fields_in_payload(self) -> None:
        update = GuildUpdate(name="New Name", verification_level=VerificationLevel.HIGH, banner=None)

        assert update.to_payload() == {"name": "New Name", "verification_level": 3, "banner": None}

    def test_empty_payload(self) -> None:
        assert GuildUpdate().to_payload() == {}

    def test_unknown_keys_pass_through(self) -> None:
        update = GuildUpdate.model_validate({"name": "New Name", "home_header": "abc"})

        assert update.to_payload() == {"name": "New Name", "home_header": "abc"}

    def test_unknown_keys_are_json_serialized(self) -> None:
        class Tone(enum.Enum):
            RED = "red"

        update = GuildUpdate.model_validate({"name": "New Name", "custom_at": date(2025, 1, 1), "tone": Tone.RED})

        assert update.to_payload() == {"name": "New Name", "custom_at": "2025-01-01", "tone": "red"}

    def test_features(self) -> None:
        update = GuildUpdate(features=[GuildFeature.COMMUNITY, GuildFeature.INVITES_DISABLED])

        assert update.to_payload() == {"features": ["COMMUNITY", "INVITES_DISABLED"]}

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "a"},
            {"afk_timeout": 42},
            {"verification_level": 9},
            {"system_channel_flags": -1},
            {"owner_id": "me"},
        ],
    )
    def test_invalid_values(self, payload: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            GuildUpdate.model_validate(payload)
