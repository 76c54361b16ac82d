"""
Edit History admin pages: the paginated log and the API key settings.
"""

import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from audit.forms import HistorySettingsForm
from audit.reader import PAGE_PARAM, build_page_links, list_logs, parse_page
from common.decorators import edit_history_admin_required, handle_errors
from common.utils import get_api_key, set_api_key

logger = logging.getLogger(__name__)


@require_http_methods(['GET'])
@edit_history_admin_required
@handle_errors
def logs_page(request):
    """User edit history, 10 rows per page, newest first"""
    page = parse_page(request.GET.get(PAGE_PARAM, 1))
    log_page = list_logs(page)

    context = {
        'page_title': 'User Edit History',
        'log_page': log_page,
        'rows': log_page.rows,
        'page_links': build_page_links(request.GET, log_page.total_pages, log_page.page),
    }
    return render(request, 'audit/logs.html', context)


@require_http_methods(['GET', 'POST'])
@edit_history_admin_required
@handle_errors
def settings_page(request):
    """Geolocation API key settings"""
    if request.method == 'POST' and 'submit' in request.POST:
        form = HistorySettingsForm(request.POST)
        if form.is_valid():
            set_api_key(form.cleaned_data['api_key'])
            messages.success(request, 'API Key saved!')
            return redirect('audit:settings')
    else:
        form = HistorySettingsForm(initial={'api_key': get_api_key()})

    return render(request, 'audit/settings.html', {
        'page_title': 'Edit History Settings',
        'form': form,
    })
