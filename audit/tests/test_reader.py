from datetime import datetime, timedelta, timezone as dt_timezone

from django.contrib.auth import get_user_model
from django.http import QueryDict
from django.test import SimpleTestCase, TestCase, override_settings

from audit.models import EditHistoryLog
from audit.reader import build_page_links, list_logs, parse_page
from content.models import Post
from core.constants import ActionType, UNKNOWN_USER

BASE_TIME = datetime(2024, 1, 2, 3, 4, tzinfo=dt_timezone.utc)


def make_entry(post_id=1, user_id=0, action_time=None, action_type=ActionType.UPDATE):
    return EditHistoryLog.objects.create(
        user_id=user_id,
        post_id=post_id,
        action_time=action_time or BASE_TIME,
        action_type=action_type,
        activity_name=ActionType.ACTIVITY_NAMES[action_type],
        user_ip='192.0.2.1',
        location='Location not found',
    )


class ParsePageTests(SimpleTestCase):

    def test_valid_numbers(self):
        self.assertEqual(parse_page('3'), 3)
        self.assertEqual(parse_page(2), 2)

    def test_invalid_values_clamp_to_first_page(self):
        for raw in (None, '', 'abc', '0', '-4', '2.5'):
            self.assertEqual(parse_page(raw), 1, raw)


class ListLogsTests(TestCase):

    def test_twenty_five_rows_make_three_pages(self):
        for i in range(25):
            make_entry(post_id=i, action_time=BASE_TIME + timedelta(minutes=i))

        first = list_logs(1, 10)
        third = list_logs(3, 10)
        beyond = list_logs(4, 10)

        self.assertEqual(first.total_pages, 3)
        self.assertEqual(first.total_rows, 25)
        self.assertEqual(len(first.rows), 10)
        self.assertEqual(len(third.rows), 5)
        self.assertEqual(beyond.rows, [])
        self.assertEqual(beyond.total_pages, 3)

    def test_huge_page_number_is_an_empty_page(self):
        make_entry()
        huge = parse_page('99999999999999999999')

        log_page = list_logs(huge, 10)

        self.assertEqual(log_page.rows, [])
        self.assertEqual(log_page.total_pages, 1)
        self.assertEqual(log_page.page, huge)

    def test_empty_log(self):
        log_page = list_logs(1)

        self.assertEqual(log_page.total_pages, 0)
        self.assertEqual(log_page.rows, [])

    def test_newest_first(self):
        t1 = make_entry(post_id=1, action_time=BASE_TIME)
        t3 = make_entry(post_id=3, action_time=BASE_TIME + timedelta(hours=2))
        t2 = make_entry(post_id=2, action_time=BASE_TIME + timedelta(hours=1))

        rows = list_logs(1, 10).rows

        self.assertEqual([row.entry.pk for row in rows], [t3.pk, t2.pk, t1.pk])

    def test_same_time_ties_broken_by_insertion_order(self):
        first = make_entry(post_id=1)
        second = make_entry(post_id=2)

        rows = list_logs(1, 10).rows

        self.assertEqual([row.entry.pk for row in rows], [second.pk, first.pk])

    def test_page_is_clamped_to_one(self):
        make_entry()

        log_page = list_logs(0, 10)

        self.assertEqual(log_page.page, 1)
        self.assertEqual(len(log_page.rows), 1)

    @override_settings(EDIT_HISTORY_PAGE_SIZE=2)
    def test_default_page_size_from_settings(self):
        for i in range(5):
            make_entry(post_id=i)

        log_page = list_logs(1)

        self.assertEqual(log_page.page_size, 2)
        self.assertEqual(log_page.total_pages, 3)


@override_settings(TIME_ZONE='UTC', EDIT_HISTORY_DATE_FORMAT='Y-m-d', EDIT_HISTORY_TIME_FORMAT='H:i')
class DisplayFieldTests(TestCase):

    def setUp(self):
        self.user = get_user_model().objects.create_user('editor', password='pw')
        self.post = Post.objects.create(title='Launch notes', status='publish')
        EditHistoryLog.objects.all().delete()

    def test_resolved_names_and_time(self):
        make_entry(post_id=self.post.pk, user_id=self.user.pk)

        row = list_logs(1).rows[0]

        self.assertEqual(row.user_display, 'editor')
        self.assertEqual(row.post_title, 'Launch notes')
        self.assertEqual(row.post_url, f'/admin/content/post/{self.post.pk}/change/')
        self.assertEqual(row.action_time_display, '2024-01-02 03:04')

    def test_missing_user_and_post_fall_back(self):
        make_entry(post_id=999999, user_id=0)
        make_entry(post_id=999998, user_id=424242)

        rows = list_logs(1).rows

        self.assertEqual([row.user_display for row in rows], [UNKNOWN_USER, UNKNOWN_USER])
        self.assertEqual([row.post_title for row in rows], ['', ''])
        self.assertEqual([row.post_url for row in rows], ['', ''])

    def test_deleted_post_keeps_other_rows(self):
        make_entry(post_id=self.post.pk, user_id=self.user.pk, action_time=BASE_TIME)
        gone = Post.objects.create(title="Short lived", status="publish")
        gone_id = gone.pk
        make_entry(post_id=gone_id, user_id=self.user.pk, action_time=BASE_TIME + timedelta(minutes=1))
        gone.delete()

        rows = list_logs(1).rows
        titles = {row.entry.post_id: row.post_title for row in rows}

        self.assertEqual(titles[self.post.pk], 'Launch notes')
        self.assertEqual(titles[gone_id], '')


class PageLinkTests(SimpleTestCase):

    def test_one_link_per_page_current_marked(self):
        links = build_page_links(QueryDict('paged=2'), 3, 2)

        self.assertEqual([link.number for link in links], [1, 2, 3])
        self.assertEqual([link.is_current for link in links], [False, True, False])
        self.assertEqual(links[0].url, '?paged=1')

    def test_other_parameters_are_kept(self):
        links = build_page_links(QueryDict('page=edit-history-logs&paged=2&s=a b'), 2, 2)

        self.assertEqual(links[0].url, '?page=edit-history-logs&paged=1&s=a+b')
        self.assertEqual(links[1].url, '?page=edit-history-logs&paged=2&s=a+b')

    def test_paged_added_when_absent(self):
        links = build_page_links(QueryDict('s=x'), 1, 1)

        self.assertEqual(links[0].url, '?s=x&paged=1')

    def test_no_pages_no_links(self):
        self.assertEqual(build_page_links(QueryDict(''), 0, 1), [])
