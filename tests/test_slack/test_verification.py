"""Tests for Slack request signature verification."""

import hashlib
import hmac
import time

from provisioner.slack.verification import is_authentic

SECRET = "test_signing_secret_1234"
BODY = b"command=%2Fprovision&trigger_id=T123&user_id=U123"


def _signed_headers(body: bytes, secret: str = SECRET, timestamp: str | None = None) -> dict:
    """Generate Slack-compatible signature headers."""
    timestamp = timestamp or str(int(time.time()))
    sig_basestring = f"v0:{timestamp}:{body.decode()}"
    signature = "v0=" + hmac.new(
        secret.encode(), sig_basestring.encode(), hashlib.sha256
    ).hexdigest()
    return {
        "X-Slack-Request-Timestamp": timestamp,
        "X-Slack-Signature": signature,
    }


def _flip_last_char(value: str) -> str:
    last = value[-1]
    return value[:-1] + ("0" if last != "0" else "1")


def test_valid_signature_accepted():
    """A correctly signed body verifies."""
    assert is_authentic(SECRET, BODY, _signed_headers(BODY)) is True


def test_mutated_body_rejected():
    """Changing one byte of the body breaks verification."""
    headers = _signed_headers(BODY)
    tampered = BODY[:-1] + b"4"
    assert is_authentic(SECRET, tampered, headers) is False


def test_mutated_signature_rejected():
    """Changing one character of the signature breaks verification."""
    headers = _signed_headers(BODY)
    headers["X-Slack-Signature"] = _flip_last_char(headers["X-Slack-Signature"])
    assert is_authentic(SECRET, BODY, headers) is False


def test_mutated_timestamp_rejected():
    """Changing the timestamp (still within the freshness window) breaks verification."""
    headers = _signed_headers(BODY)
    headers["X-Slack-Request-Timestamp"] = str(int(headers["X-Slack-Request-Timestamp"]) - 1)
    assert is_authentic(SECRET, BODY, headers) is False


def test_wrong_secret_rejected():
    """A body signed with another secret fails."""
    headers = _signed_headers(BODY, secret="some_other_secret")
    assert is_authentic(SECRET, BODY, headers) is False


def test_stale_timestamp_rejected():
    """A correctly signed request older than five minutes fails."""
    old = str(int(time.time()) - 60 * 10)
    assert is_authentic(SECRET, BODY, _signed_headers(BODY, timestamp=old)) is False


def test_missing_headers_rejected():
    """No signature headers at all fails."""
    assert is_authentic(SECRET, BODY, {}) is False


def test_missing_signature_header_rejected():
    """A timestamp without a signature fails."""
    headers = _signed_headers(BODY)
    del headers["X-Slack-Signature"]
    assert is_authentic(SECRET, BODY, headers) is False


def test_non_numeric_timestamp_rejected():
    """A malformed timestamp fails instead of raising."""
    headers = _signed_headers(BODY)
    headers["X-Slack-Request-Timestamp"] = "not-a-number"
    assert is_authentic(SECRET, BODY, headers) is False


def test_empty_secret_rejected():
    """Without a configured secret nothing verifies, even a matching signature."""
    assert is_authentic("", BODY, _signed_headers(BODY, secret="")) is False


def test_non_ascii_signature_rejected():
    """A signature with non-ASCII characters fails instead of raising."""
    headers = _signed_headers(BODY)
    headers["X-Slack-Signature"] = "v0=ÿ"
    assert is_authentic(SECRET, BODY, headers) is False
