"""Avatar URL routes."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from gravatarkit.config import config
from gravatarkit.models.enums import DefaultImage, Rating
from gravatarkit.utils.gravatar import AvatarRequest
from gravatarkit.web.templating import GravatarHelper, render_template

router: APIRouter = APIRouter(tags=["avatar"])

logger = logging.getLogger("gravatarkit.routes")


class AvatarResponse(BaseModel):
    email: str
    digest: str
    url: str


def parse_default(raw: str | None) -> DefaultImage | str | None:
    """Interpret ``d`` as a named policy, falling back to an image URL."""
    if raw is None or not raw.strip():
        return None
    try:
        return DefaultImage.from_param(raw)
    except ValueError:
        return raw


def parse_rating(raw: str | None) -> Rating | None:
    if raw is None or not raw.strip():
        return None
    try:
        return Rating.from_param(raw)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _build_avatar(
    request: Request,
    email: str,
    size: int,
    default: str | None,
    rating: str | None,
    force: bool,
    ext: bool,
) -> AvatarRequest:
    avatar = GravatarHelper(request).generator(email, size)

    parsed_rating = parse_rating(rating)
    if parsed_rating is not None:
        avatar.rating(parsed_rating)

    parsed_default = parse_default(default)
    if parsed_default is not None:
        avatar.default_image(parsed_default)

    if force:
        avatar.force_default_image()
    if ext:
        avatar.append_file_type()
    return avatar


@router.get("/avatar", response_model=AvatarResponse)
async def avatar_url(
    request: Request,
    email: str,
    s: int = 0,
    d: str | None = None,
    r: str | None = None,
    f: bool = False,
    ext: bool = False,
) -> AvatarResponse:
    """Return the avatar URL for an email address."""
    avatar = _build_avatar(request, email, s, d, r, f, ext)
    url = avatar.url
    logger.info("Built avatar URL for digest %s", avatar.digest)
    return AvatarResponse(email=email, digest=avatar.digest, url=url)


@router.get("/avatar/redirect")
async def avatar_redirect(
    request: Request,
    email: str,
    s: int = 0,
    d: str | None = None,
    r: str | None = None,
    f: bool = False,
    ext: bool = False,
) -> RedirectResponse:
    """Redirect to the avatar image itself."""
    avatar = _build_avatar(request, email, s, d, r, f, ext)
    return RedirectResponse(url=avatar.url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/preview", response_class=HTMLResponse)
async def preview(
    request: Request,
    email: str,
    s: Annotated[int | None, Query()] = None,
) -> HTMLResponse:
    """Show a page rendering the avatar through the template helpers."""
    size = config.GRAVATAR_DEFAULT_SIZE if s is None else s
    return render_template(
        "preview.html",
        request,
        {
            "email": email,
            "size": size,
            "default": parse_default(config.GRAVATAR_DEFAULT_IMAGE),
        },
    )
