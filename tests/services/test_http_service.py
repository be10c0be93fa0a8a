from unittest.mock import Mock

import pytest
import requests

from siteindexer.exceptions import HttpFetchError
from siteindexer.services.http_service import HttpService


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'


def test_fetch_sends_user_agent_and_timeouts():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='IndexerBot', http_client=mock_http_client, connect_timeout=10, read_timeout=15)
    http.fetch('http://example.com/a')
    mock_http_client.assert_called_once_with(
        'http://example.com/a',
        headers={'User-Agent': 'IndexerBot'},
        timeout=(10, 15),
    )


def test_error_status_is_returned_not_raised():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 404
    mock_http_client.return_value.text = 'not here'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com/missing')
    assert response.status_code == 404
    assert response.text == 'not here'


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectTimeout("connect timed out"),
    requests.exceptions.ReadTimeout("read timed out"),
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.ChunkedEncodingError("broken body"),
])
def test_fetch_wraps_requests_exception(exc):
    mock_http_client = Mock(side_effect=exc)
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(HttpFetchError) as err:
        http.fetch('http://example.com')
    assert "http://example.com" in str(err.value)
    assert err.value.original is exc

