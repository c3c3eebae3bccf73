"""FastAPI dependency utilities."""

from collections.abc import Generator
import hashlib
import hmac

from fastapi import Depends, Header, HTTPException, Request, status

from pingbot.application.use_cases.pings import IdentityResolver
from pingbot.config import Settings, get_settings
from pingbot.infrastructure.github import GitHubDirectory

_SIGNATURE_PREFIX = "sha256="


def get_identity_resolver(
    settings: Settings = Depends(get_settings),
) -> Generator[IdentityResolver, None, None]:
    """Yield a resolver over a fresh directory client and close it afterwards."""

    directory = GitHubDirectory(settings)
    try:
        yield IdentityResolver(directory)
    finally:
        directory.close()


def compute_signature(secret: str, body: bytes) -> str:
    """Return the ``X-Hub-Signature-256`` value GitHub sends for ``body``."""

    digest = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return f"{_SIGNATURE_PREFIX}{digest}"


async def verify_github_signature(
    request: Request,
    x_hub_signature_256: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> bytes:
    """Return the raw request body once its signature has been checked.

    Deliveries are accepted unsigned when no webhook secret is configured.
    """

    body = await request.body()
    if not settings.webhook_secret:
        return body

    if not x_hub_signature_256 or not hmac.compare_digest(
        compute_signature(settings.webhook_secret, body), x_hub_signature_256
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid webhook signature",
        )
    return body
