from unittest.mock import MagicMock, patch

import pytest

from instance_credentials import (
    Credentials,
    HttpMetadataFetcher,
    InstanceProfileCredentialsSupplier,
    RoleCredentialsResolver,
)

DOCUMENT = (
    '{ "Code" : "Success", "AccessKeyId" : "AAAAA", "SecretAccessKey" : "SSSSSSS", '
    '"Token" : "TTTTTTT", "Expiration" : "2013-02-26T08:12:23Z" }'
)


def test_end_to_end():
    fetcher = MagicMock(spec=HttpMetadataFetcher)
    fetcher.list.return_value = ["my-role"]
    fetcher.get.return_value = DOCUMENT

    supplier = InstanceProfileCredentialsSupplier.from_base_uri(
        "http://169.254.169.254/latest/meta-data/", fetcher
    )
    credentials = supplier.get()

    assert credentials.to_map() == {
        "accessKey": "AAAAA",
        "secretKey": "SSSSSSS",
        "sessionToken": "TTTTTTT",
    }
    fetcher.get.assert_called_once_with(
        "http://169.254.169.254/latest/meta-data/", "iam/security-credentials/my-role"
    )


def test_no_role_gives_empty_credentials():
    fetcher = MagicMock(spec=HttpMetadataFetcher)
    fetcher.list.return_value = []

    credentials = InstanceProfileCredentialsSupplier.from_base_uri(
        "http://169.254.169.254/latest/meta-data/", fetcher
    ).get()

    assert credentials.is_empty()
    fetcher.get.assert_not_called()


def test_injected_source():
    supplier = InstanceProfileCredentialsSupplier(lambda: DOCUMENT)

    assert supplier() == Credentials(
        access_key="AAAAA", secret_key="SSSSSSS", session_token="TTTTTTT"
    )


def test_injected_source_without_document():
    assert InstanceProfileCredentialsSupplier(lambda: None).get() == Credentials()


def test_calls_are_independent():
    source = MagicMock(return_value=DOCUMENT)
    supplier = InstanceProfileCredentialsSupplier(source)

    first = supplier.get()
    second = supplier.get()

    assert first == second
    assert first is not second
    assert source.call_count == 2


def test_default_source():
    supplier = InstanceProfileCredentialsSupplier()

    assert isinstance(supplier.source, RoleCredentialsResolver)
    assert supplier.source.base_uri == "http://169.254.169.254/latest/meta-data/"


def test_rejects_non_callable_source():
    with pytest.raises(TypeError):
        InstanceProfileCredentialsSupplier("not-a-source")  # type: ignore


def test_rejects_missing_base_uri():
    with pytest.raises(ValueError):
        InstanceProfileCredentialsSupplier.from_base_uri(None)  # type: ignore


@patch("http.client.HTTPConnection")
def test_over_http(mock_http: MagicMock, make_response):
    mock_conn = MagicMock()
    mock_http.return_value = mock_conn
    mock_conn.getresponse.side_effect = [
        make_response(200, b"mock-token"),
        make_response(200, b"my-role"),
        make_response(200, b"mock-token"),
        make_response(200, DOCUMENT.encode()),
    ]

    credentials = InstanceProfileCredentialsSupplier().get()

    assert credentials.to_map() == {
        "accessKey": "AAAAA",
        "secretKey": "SSSSSSS",
        "sessionToken": "TTTTTTT",
    }
    assert mock_conn.request.call_count == 4
    mock_conn.request.assert_called_with(
        "GET",
        "/latest/meta-data/iam/security-credentials/my-role",
        headers={"X-aws-ec2-metadata-token": "mock-token"},
    )
