# dashboard/utils.py

from datetime import timedelta
from django.utils.timezone import now
from django.db.models import Count

REPORT_WINDOW_DAYS = 7


def status_distribution(queryset):
    """
    Возвращает количество записей по каждому статусу.
    """
    return list(
        queryset.order_by().values('status').annotate(count=Count('id')).order_by('status')
    )


def report_window_start():
    return now() - timedelta(days=REPORT_WINDOW_DAYS)


def closed_by_team(tasks):
    return list(
        tasks.order_by()
        .values('team_id', 'team__name')
        .annotate(count=Count('id'))
        .order_by('-count', 'team__name')
    )


def closed_by_owner(tasks):
    rows = (
        tasks.order_by()
        .values('owners__id', 'owners__name')
        .annotate(count=Count('id'))
        .order_by('-count', 'owners__name')
    )

    # Задачи без исполнителей группируются в строку с пустым id
    return [row for row in rows if row['owners__id'] is not None]
