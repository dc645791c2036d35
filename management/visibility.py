# management/visibility.py

from django.db.models import Q
from projects.models import Project
from tasks.models import Task
from .membership import get_user_team_ids


def visible_projects(user_id):
    """
    Проекты, которые видит пользователь: созданные им и проекты его команд.
    """
    team_ids = get_user_team_ids(user_id)

    return Project.objects.filter(Q(created_by=user_id) | Q(team_id__in=team_ids))


def visible_tasks(user_id):
    """
    Задачи, которые видит пользователь: созданные им и те, где он исполнитель.
    """
    task_ids = Task.objects.filter(Q(created_by=user_id) | Q(owners=user_id)).values('id')

    return Task.objects.filter(id__in=task_ids)
