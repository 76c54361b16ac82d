"""
Edit History API

Read-only JSON view of the same pages the admin log shows.
"""

from rest_framework.permissions import BasePermission, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from audit.reader import PAGE_PARAM, list_logs, parse_page
from audit.serializers import LogRowSerializer
from common.decorators import can_manage_edit_history


class CanManageEditHistory(BasePermission):
    message = 'You do not have permission to view edit history.'

    def has_permission(self, request, view):
        return can_manage_edit_history(request.user)


class EditHistoryLogListView(APIView):
    """
    GET /edit-history/api/logs/?paged=N

    Returns:
    - page, total_pages, count
    - results: rows for the page, newest first
    """

    permission_classes = [IsAuthenticated, CanManageEditHistory]

    def get(self, request):
        page = parse_page(request.query_params.get(PAGE_PARAM, 1))
        log_page = list_logs(page)
        serializer = LogRowSerializer(log_page.rows, many=True)
        return Response({
            'page': log_page.page,
            'total_pages': log_page.total_pages,
            'count': log_page.total_rows,
            'results': serializer.data,
        })
