"""Human verification for order submissions via reCAPTCHA site-verify."""

from __future__ import annotations

import logging

import httpx

from app.core.config import settings
from app.core.errors import VerificationFailed

logger = logging.getLogger(__name__)


class RecaptchaVerifier:
    """Checks reCAPTCHA tokens against the verification service.

    Deployments without ``RECAPTCHA_SECRET_KEY`` run with the feature off:
    a request that carries no token is let through. A request that does
    carry a token is always checked, secret or not.
    """

    def __init__(
        self,
        secret: str,
        verify_url: str,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.secret = secret
        self.verify_url = verify_url
        self.timeout = timeout
        self.client = client

    def is_disabled_for(self, token: str | None) -> bool:
        return not token and not self.secret

    def verify(self, token: str | None) -> None:
        if self.is_disabled_for(token):
            return
        try:
            if self.client is not None:
                response = self._post(self.client, token)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, token)
            response.raise_for_status()
            success = bool(response.json().get("success"))
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            logger.warning("reCAPTCHA verification unavailable: %s", exc)
            raise VerificationFailed() from exc
        if not success:
            raise VerificationFailed()

    def _post(self, client: httpx.Client, token: str | None) -> httpx.Response:
        return client.post(self.verify_url, params={"secret": self.secret, "response": token or ""})


def get_recaptcha_verifier() -> RecaptchaVerifier:
    return RecaptchaVerifier(
        secret=settings.recaptcha_secret_key,
        verify_url=settings.recaptcha_verify_url,
        timeout=settings.recaptcha_timeout_seconds,
    )
