from unittest.mock import patch

from django.db import DatabaseError, transaction
from django.test import SimpleTestCase, TestCase

from common.models import HistorySettings
from common.utils import get_api_key, sanitize_text_field, set_api_key


class SanitizeTextFieldTests(SimpleTestCase):

    def test_plain_text_is_kept(self):
        self.assertEqual(sanitize_text_field('abc123'), 'abc123')

    def test_tags_and_script_content_are_removed(self):
        self.assertEqual(sanitize_text_field('<script>alert("x")</script>abc<b>123</b>'), 'abc123')

    def test_whitespace_is_collapsed(self):
        self.assertEqual(sanitize_text_field('  abc \n\t 123  '), 'abc 123')

    def test_octets_and_control_characters_are_removed(self):
        self.assertEqual(sanitize_text_field('abc%0a123\x00'), 'abc123')

    def test_none_is_empty(self):
        self.assertEqual(sanitize_text_field(None), '')


class ApiKeyStoreTests(TestCase):

    def test_default_is_empty(self):
        self.assertEqual(get_api_key(), '')

    def test_round_trip(self):
        set_api_key('abc123')

        self.assertEqual(get_api_key(), 'abc123')
        self.assertEqual(HistorySettings.objects.count(), 1)

    def test_overwrite_keeps_single_row(self):
        set_api_key('first')
        set_api_key('second')

        self.assertEqual(get_api_key(), 'second')
        self.assertEqual(HistorySettings.objects.count(), 1)

    def test_markup_is_stripped(self):
        stored = set_api_key('<img src=x onerror=alert(1)>abc123')

        self.assertEqual(stored, 'abc123')
        self.assertEqual(get_api_key(), 'abc123')

    def test_database_error_reads_as_unset_inside_a_savepoint(self):
        broken_lookup = patch.object(HistorySettings.objects, 'values_list', side_effect=DatabaseError('no such table'))
        with transaction.atomic():
            with broken_lookup, patch('common.utils.transaction.atomic', wraps=transaction.atomic) as atomic:
                self.assertEqual(get_api_key(), '')
            atomic.assert_called_once_with()

            # The surrounding transaction is still usable
            set_api_key('after-failure')
            self.assertEqual(get_api_key(), 'after-failure')
