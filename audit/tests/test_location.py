from unittest.mock import MagicMock, patch

import requests
from django.test import TestCase, override_settings

from audit import location
from common.utils import set_api_key
from core.constants import LOCATION_NOT_FOUND


def _make_response(payload, status_code=200):
    """Build a mock requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


@patch('audit.location.requests.get')
class ResolveTests(TestCase):

    def test_full_location(self, mock_get):
        mock_get.return_value = _make_response({
            'ip': '8.8.8.8', 'city': 'Mountain View', 'region': 'California', 'country': 'US',
        })

        self.assertEqual(location.resolve('8.8.8.8'), 'Mountain View, California, US')

    def test_any_missing_field_gives_sentinel(self, mock_get):
        complete = {'city': 'City', 'region': 'Region', 'country': 'Country'}
        for missing in complete:
            payload = {key: value for key, value in complete.items() if key != missing}
            mock_get.return_value = _make_response(payload)
            self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_empty_field_gives_sentinel(self, mock_get):
        mock_get.return_value = _make_response({'city': '', 'region': 'Region', 'country': 'Country'})

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_error_payload_gives_sentinel(self, mock_get):
        mock_get.return_value = _make_response(
            {'status': 403, 'error': {'title': 'Unknown token'}}, status_code=403,
        )

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_transport_error_gives_sentinel(self, mock_get):
        mock_get.side_effect = requests.ConnectionError('unreachable')

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_malformed_body_gives_sentinel(self, mock_get):
        resp = _make_response(None)
        resp.json.side_effect = ValueError('Expecting value')
        mock_get.return_value = resp

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_non_object_body_gives_sentinel(self, mock_get):
        mock_get.return_value = _make_response(['Mountain View'])

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)

    def test_request_uses_stored_api_key(self, mock_get):
        mock_get.return_value = _make_response({})
        set_api_key('abc123')

        location.resolve('2001:db8::1')

        mock_get.assert_called_once_with(
            'https://ipinfo.io/2001:db8::1/json', params={'token': 'abc123'}, timeout=None,
        )

    def test_request_is_made_without_api_key(self, mock_get):
        mock_get.return_value = _make_response({})

        self.assertEqual(location.resolve('1.2.3.4'), LOCATION_NOT_FOUND)
        mock_get.assert_called_once()
        self.assertEqual(mock_get.call_args.kwargs['params'], {'token': ''})

    @override_settings(EDIT_HISTORY_GEOLOCATION_URL='https://geo.example.com/', EDIT_HISTORY_GEOLOCATION_TIMEOUT=2.5)
    def test_configured_service(self, mock_get):
        mock_get.return_value = _make_response({})

        location.resolve('1.2.3.4')

        mock_get.assert_called_once_with(
            'https://geo.example.com/1.2.3.4/json', params={'token': ''}, timeout=2.5,
        )
