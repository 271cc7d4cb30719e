"""Jinja2 templating helpers (shared by routes).

Templates get ``gravatar(...)`` and ``gravatar_generator(...)`` globals that
build avatar URLs for the request being rendered, choosing ``https`` when the
request itself arrived over a secure connection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from starlette.requests import HTTPConnection

from gravatarkit.config import config
from gravatarkit.models.enums import DefaultImage, Rating
from gravatarkit.utils.gravatar import AvatarRequest

_SECURE_SCHEMES = frozenset({"https", "wss"})


def is_secure_request(request: Any) -> bool:
    """Return whether ``request`` arrived over a secure connection.

    Starlette requests and websockets are checked by URL scheme (and
    ``X-Forwarded-Proto`` when ``TRUST_FORWARDED_PROTO`` is enabled). Other
    request objects may expose ``is_secure`` as a boolean attribute or a
    zero-argument method.
    """
    if isinstance(request, HTTPConnection):
        if request.url.scheme in _SECURE_SCHEMES:
            return True
        if config.TRUST_FORWARDED_PROTO:
            forwarded = request.headers.get("x-forwarded-proto", "")
            return forwarded.split(",")[0].strip().lower() == "https"
        return False

    is_secure = getattr(request, "is_secure", False)
    if callable(is_secure):
        return bool(is_secure())
    return bool(is_secure)


class GravatarHelper:
    """Per-request adapter that builds avatar URLs."""

    def __init__(self, request: Any) -> None:
        self.use_https = is_secure_request(request)

    def generator(self, email: str, size: int | None = None) -> AvatarRequest:
        avatar = AvatarRequest(email, self.use_https)
        if size is not None:
            avatar.size(size)
        return avatar

    def url(
        self,
        email: str,
        size: int,
        default: DefaultImage | str | None = None,
        rating: Rating | None = None,
    ) -> str:
        avatar = self.generator(email, size)
        if rating is not None:
            avatar.rating(rating)
        if default is not None:
            avatar.default_image(default)
        return avatar.url


@pass_context
def gravatar_global(
    context: Context,
    email: str,
    size: int,
    default: DefaultImage | str | None = None,
    rating: Rating | None = None,
) -> str:
    """Template global: ``{{ gravatar(user.email, 64, DefaultImage.RETRO) }}``."""
    return GravatarHelper(context["request"]).url(email, size, default, rating)


@pass_context
def gravatar_generator_global(
    context: Context, email: str, size: int | None = None
) -> AvatarRequest:
    """Template global returning a builder for further chaining."""
    return GravatarHelper(context["request"]).generator(email, size)


def install_gravatar(env: Environment) -> None:
    """Register the avatar helpers on a Jinja2 environment."""
    env.globals["gravatar"] = gravatar_global
    env.globals["gravatar_generator"] = gravatar_generator_global
    env.globals["DefaultImage"] = DefaultImage
    env.globals["Rating"] = Rating


templates_path = Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(templates_path))
install_gravatar(templates.env)


def render_template(
    template_name: str,
    request: Request,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a template with the request in its context."""
    if context is None:
        context = {}

    return templates.TemplateResponse(
        request, template_name, context, status_code=status_code
    )
