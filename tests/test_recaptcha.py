"""reCAPTCHA verifier tests."""

import httpx
import pytest

from app.core.errors import VerificationFailed
from app.services.recaptcha import RecaptchaVerifier

VERIFY_URL = "https://recaptcha.test/siteverify"


def _verifier(handler, secret: str = "server-secret") -> RecaptchaVerifier:
    return RecaptchaVerifier(
        secret=secret,
        verify_url=VERIFY_URL,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_successful_verification_sends_secret_and_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True})

    _verifier(handler).verify("human-token")

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert seen[0].url.params["secret"] == "server-secret"
    assert seen[0].url.params["response"] == "human-token"


def test_unsuccessful_verification_is_rejected() -> None:
    verifier = _verifier(lambda request: httpx.Response(200, json={"success": False}))

    with pytest.raises(VerificationFailed):
        verifier.verify("bot-token")


def test_provider_outage_is_rejected() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(VerificationFailed):
        _verifier(handler).verify("human-token")


def test_bad_provider_response_is_rejected() -> None:
    with pytest.raises(VerificationFailed):
        _verifier(lambda request: httpx.Response(500, text="oops")).verify("human-token")
    with pytest.raises(VerificationFailed):
        _verifier(lambda request: httpx.Response(200, text="not json")).verify("human-token")


def test_missing_token_without_secret_is_skipped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("verification service must not be called")

    verifier = _verifier(handler, secret="")

    assert verifier.is_disabled_for(None)
    verifier.verify(None)
    verifier.verify("")


def test_missing_token_with_secret_is_rejected() -> None:
    verifier = _verifier(lambda request: httpx.Response(200, json={"success": False, "error-codes": ["missing-input-response"]}))

    assert not verifier.is_disabled_for(None)
    with pytest.raises(VerificationFailed):
        verifier.verify(None)


def test_supplied_token_is_checked_even_without_secret() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.params["response"])
        return httpx.Response(200, json={"success": False})

    with pytest.raises(VerificationFailed):
        _verifier(handler, secret="").verify("some-token")
    assert calls == ["some-token"]
