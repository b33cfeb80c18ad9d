"""
Image URL construction for hashes returned by the API.

The API never returns image URLs, only content hashes. A URL is built as
`https://cdn.discordapp.com/{kind}/{owner_id}/{hash}.{format}?size={size}`.

@link https://discord.com/developers/docs/reference#image-formatting
"""

from typing import Literal

from starlette.datastructures import URL


DISCORD_CDN_URL = "https://cdn.discordapp.com"

MIN_IMAGE_SIZE = 16
MAX_IMAGE_SIZE = 4096

ImageFormat = Literal["png", "jpg", "jpeg", "webp", "gif"]
IMAGE_FORMATS: frozenset[str] = frozenset({"png", "jpg", "jpeg", "webp", "gif"})


def is_animated(image_hash: str) -> bool:
    return image_hash.startswith("a_")


def validate_size(size: int) -> int:
    """Return `size` if it is a power of two within [16, 4096], raise ValueError otherwise."""
    if not MIN_IMAGE_SIZE <= size <= MAX_IMAGE_SIZE or size & (size - 1):
        raise ValueError(f"Image size must be a power of 2 between {MIN_IMAGE_SIZE} and {MAX_IMAGE_SIZE}, got {size}")
    return size


def _resolve_format(image_hash: str, fmt: ImageFormat | None, allow_animated: bool) -> str:
    animated = allow_animated and is_animated(image_hash)
    if fmt is None:
        return "gif" if animated else "png"
    if fmt not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format {fmt!r}")
    if fmt == "gif" and not animated:
        raise ValueError(f"Format 'gif' is only available for animated images, got hash {image_hash!r}")
    return fmt


def _build_url(path: str, size: int | None) -> str:
    url = URL(f"{DISCORD_CDN_URL}/{path}")
    if size is not None:
        url = url.include_query_params(size=validate_size(size))
    return str(url)


def build_image_url(
    kind: str,
    owner_id: str,
    image_hash: str,
    fmt: ImageFormat | None = None,
    size: int | None = None,
    *,
    allow_animated: bool = True,
) -> str:
    """
    Build a CDN URL for an image hash.

    Args:
        kind: CDN path segment, e.g. `icons` or `banners`.
        owner_id: ID of the guild or role that owns the image.
        image_hash: Opaque hash as returned by the API.
        fmt: Image extension. Defaults to `gif` for animated hashes and `png` otherwise.
        size: Requested edge length, a power of 2 between 16 and 4096.
        allow_animated: Whether this asset kind can be served as `gif`.

    Raises:
        ValueError: If the size or format is not allowed for this image.
    """
    extension = _resolve_format(image_hash, fmt, allow_animated)
    return _build_url(f"{kind}/{owner_id}/{image_hash}.{extension}", size)


def guild_icon_url(guild_id: str, icon: str, fmt: ImageFormat | None = None, size: int | None = None) -> str:
    return build_image_url("icons", guild_id, icon, fmt, size)


def guild_splash_url(guild_id: str, splash: str, fmt: ImageFormat | None = None, size: int | None = None) -> str:
    return build_image_url("splashes", guild_id, splash, fmt, size, allow_animated=False)


def guild_discovery_splash_url(
    guild_id: str, discovery_splash: str, fmt: ImageFormat | None = None, size: int | None = None
) -> str:
    return build_image_url("discovery-splashes", guild_id, discovery_splash, fmt, size, allow_animated=False)


def guild_banner_url(guild_id: str, banner: str, fmt: ImageFormat | None = None, size: int | None = None) -> str:
    return build_image_url("banners", guild_id, banner, fmt, size)


def role_icon_url(role_id: str, icon: str, fmt: ImageFormat | None = None, size: int | None = None) -> str:
    return build_image_url("role-icons", role_id, icon, fmt, size, allow_animated=False)


def emoji_url(emoji_id: str, animated: bool = False, fmt: ImageFormat | None = None, size: int | None = None) -> str:
    """Emojis are addressed by ID alone, there is no hash."""
    if fmt is None:
        fmt = "gif" if animated else "png"
    elif fmt not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format {fmt!r}")
    elif fmt == "gif" and not animated:
        raise ValueError("Format 'gif' is only available for animated emojis")
    return _build_url(f"emojis/{emoji_id}.{fmt}", size)
