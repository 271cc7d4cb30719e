"""Gravatar utilities."""

from __future__ import annotations

import hashlib
import logging
from urllib.parse import quote_plus

from gravatarkit.models.enums import DefaultImage, Rating

GRAVATAR_HOST = "gravatar.com/avatar/"
MIN_SIZE = 0
MAX_SIZE = 512

logger = logging.getLogger("gravatarkit.gravatar")


class OutOfRangeError(ValueError):
    """Raised when an avatar option is outside its allowed range."""

    def __init__(self, name: str, value: int) -> None:
        """Initialize the error.

        Args:
            name: Name of the rejected option
            value: The rejected value
        """
        super().__init__(
            f"{name} must be between {MIN_SIZE} and {MAX_SIZE}, got {value}"
        )
        self.name = name
        self.value = value


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < MIN_SIZE or size > MAX_SIZE:
        logger.debug("Rejected avatar size %s", size)
        raise OutOfRangeError("size", size)


class AvatarRequest:
    """Fluent builder for a Gravatar image URL.

    Every setter returns the builder itself, so options chain::

        AvatarRequest("a@b.com", use_https=True).size(100).rating(Rating.G).url

    The email is hashed exactly as given; callers wanting Gravatar's
    canonical form should strip and lower-case it first.
    """

    def __init__(self, email: str, use_https: bool) -> None:
        self._email = email
        self._use_https = use_https
        self.size_pixels = 0
        self.rating_filter = Rating.DEFAULT
        self.default_policy = DefaultImage.GRAVATAR_LOGO
        self.default_url: str | None = None
        self.force_default = False
        self.append_file_extension = False

    @property
    def email(self) -> str:
        return self._email

    @property
    def use_https(self) -> bool:
        return self._use_https

    def size(self, size: int) -> AvatarRequest:
        """Set the edge length in pixels; 0 leaves it to Gravatar."""
        _check_size(size)
        self.size_pixels = size
        return self

    def default_image(self, default: DefaultImage | str) -> AvatarRequest:
        """Set the fallback image, either a named policy or an image URL.

        An explicit URL takes precedence over a named policy at render time,
        whichever was set first.
        """
        if isinstance(default, DefaultImage):
            self.default_policy = default
        else:
            self.default_url = default
        return self

    def rating(self, rating: Rating) -> AvatarRequest:
        self.rating_filter = rating
        return self

    def append_file_type(self) -> AvatarRequest:
        """Add a ``.jpg`` suffix to the digest."""
        self.append_file_extension = True
        return self

    def force_default_image(self) -> AvatarRequest:
        """Always serve the default image, even if an avatar exists."""
        self.force_default = True
        return self

    @property
    def digest(self) -> str:
        """Lower-case hex MD5 of the UTF-8 encoded email."""
        return hashlib.md5(  # noqa: S324
            self._email.encode("utf-8"), usedforsecurity=False
        ).hexdigest()

    @property
    def url(self) -> str:
        """Render the complete avatar URL."""
        # size_pixels is a plain attribute and may have been assigned directly
        _check_size(self.size_pixels)

        prefix = "https://" if self._use_https else "http://"
        url = f"{prefix}{GRAVATAR_HOST}{self.digest}"
        if self.append_file_extension:
            url += ".jpg"
        return url + self._query_string()

    def _default_param(self) -> str | None:
        if self.default_url is not None and self.default_url.strip():
            return quote_plus(self.default_url)
        if self.default_policy is not DefaultImage.GRAVATAR_LOGO:
            return self.default_policy.value
        return None

    def _query_string(self) -> str:
        params: list[str] = []
        if self.size_pixels > 0:
            params.append(f"s={self.size_pixels}")
        if self.rating_filter is not Rating.DEFAULT:
            params.append(f"r={self.rating_filter.value}")
        default = self._default_param()
        if default is not None:
            params.append(f"d={default}")
        if self.force_default:
            params.append("f=y")

        if not params:
            return ""
        return "?" + "&".join(params)

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"AvatarRequest(email={self._email!r}, use_https={self._use_https!r})"


def gravatar_url(
    email: str,
    *,
    size: int = 0,
    default: DefaultImage | str | None = None,
    rating: Rating | None = None,
    force_default: bool = False,
    file_extension: bool = False,
    secure: bool = True,
) -> str:
    """Return a gravatar URL for an email address."""
    avatar = AvatarRequest(email, use_https=secure).size(size)
    if default is not None:
        avatar.default_image(default)
    if rating is not None:
        avatar.rating(rating)
    if force_default:
        avatar.force_default_image()
    if file_extension:
        avatar.append_file_type()
    return avatar.url
