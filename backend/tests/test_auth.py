import pytest

from app.utils.auth import verify_api_key


def test_matching_bearer_token():
    assert verify_api_key("Bearer s3cret", "s3cret") is True


@pytest.mark.parametrize(
    "header",
    [None, "", "s3cret", "bearer s3cret", "Bearer", "Bearer ", "Bearer s3cret ", "Bearer S3CRET", "Token s3cret"],
)
def test_rejected_headers(header):
    assert verify_api_key(header, "s3cret") is False


def test_unset_secret_rejects_everything():
    assert verify_api_key("Bearer ", "") is False
    assert verify_api_key("Bearer anything", "") is False
