import pytest
from werkzeug.datastructures import Headers

from auth.exceptions import MalformedHeader, MissingHeader, WrongScheme
from auth.headers import extract_api_key, extract_bearer


def test_bearer_token_is_extracted():
    assert extract_bearer({"Authorization": "Bearer ABC123"}) == "ABC123"


def test_header_name_is_case_insensitive_for_plain_dicts():
    assert extract_bearer({"authorization": "Bearer ABC123"}) == "ABC123"


def test_werkzeug_headers_are_supported():
    assert extract_bearer(Headers([("Authorization", "Bearer ABC123")])) == "ABC123"


@pytest.mark.parametrize("headers", [{}, {"Authorization": ""}, {"X-Other": "Bearer ABC"}])
def test_missing_header(headers):
    with pytest.raises(MissingHeader) as exc:
        extract_bearer(headers)
    assert exc.value.scheme == "Bearer"


def test_wrong_scheme():
    with pytest.raises(WrongScheme):
        extract_bearer({"Authorization": "Token X"})


@pytest.mark.parametrize("value", ["Bearer", "Bearer a b", "Bearer ", "Bearer  ABC", "BearerABC"])
def test_malformed_value(value):
    with pytest.raises(MalformedHeader):
        extract_bearer({"Authorization": value})


def test_scheme_is_case_sensitive():
    with pytest.raises(WrongScheme):
        extract_bearer({"Authorization": "bearer ABC123"})


def test_repeated_authorization_header_is_malformed():
    headers = Headers([("Authorization", "Bearer A"), ("Authorization", "Bearer B")])
    with pytest.raises(MalformedHeader):
        extract_bearer(headers)


def test_api_key_is_extracted():
    assert extract_api_key({"Authorization": "ApiKey f271c81ff7084ee5b99a5091b42d486e"}) == (
        "f271c81ff7084ee5b99a5091b42d486e"
    )


def test_api_key_rejects_bearer():
    with pytest.raises(WrongScheme) as exc:
        extract_api_key({"Authorization": "Bearer ABC123"})
    assert exc.value.scheme == "ApiKey"


def test_api_key_missing_and_malformed():
    with pytest.raises(MissingHeader):
        extract_api_key({})
    with pytest.raises(MalformedHeader):
        extract_api_key({"Authorization": "ApiKey"})
