# dashboard/views.py

from management.visibility import visible_projects, visible_tasks
from management.membership import get_user_team_ids
from projects.models import STATUS_COMPLETED, STATUS_IN_PROGRESS
from rest_framework.generics import GenericAPIView
from rest_framework.response import Response
from tasks.models import Task
from .serializers import *
from .utils import *


# Вью для получения сводки по проектам и задачам пользователя
class DashboardStatsView(GenericAPIView):
    serializer_class = DashboardStatsSerializer

    def get(self, request, *args, **kwargs):
        user_id = request.user.id
        projects = visible_projects(user_id)
        tasks = visible_tasks(user_id)

        stats = {
            'projects': projects.count(),
            'created_projects': projects.filter(created_by=user_id).count(),
            'tasks': tasks.count(),
            'created_tasks': tasks.filter(created_by=user_id).count(),
            'completed': tasks.filter(status=STATUS_COMPLETED).count(),
            'in_progress': tasks.filter(status=STATUS_IN_PROGRESS).count(),
            'projects_by_status': status_distribution(projects),
            'tasks_by_status': status_distribution(tasks),
        }

        return Response(self.get_serializer(stats).data)


# Вью для получения отчета по задачам команд пользователя за последнюю неделю
class ReportOverviewView(GenericAPIView):
    serializer_class = ReportOverviewSerializer

    def get(self, request, *args, **kwargs):
        team_ids = get_user_team_ids(request.user.id)
        team_tasks = Task.objects.filter(team_id__in=team_ids)
        recently_completed = team_tasks.filter(
            status=STATUS_COMPLETED,
            completed_at__gte=report_window_start()
        )

        report = {
            'completed_last_week': recently_completed.count(),
            'pending_tasks': team_tasks.exclude(status=STATUS_COMPLETED).count(),
            'closed_by_team': closed_by_team(recently_completed),
            'closed_by_owner': closed_by_owner(recently_completed),
        }

        return Response(self.get_serializer(report).data)
