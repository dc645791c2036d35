# projects/views.py

from rest_framework.generics import CreateAPIView, ListAPIView, RetrieveAPIView, UpdateAPIView, DestroyAPIView
from management.permissions import lock_for_write, require_access, snapshot_project, snapshot_team
from management.visibility import visible_projects
from django.shortcuts import get_object_or_404
from management.policy import Action
from django.db import transaction
from users.utils import log_user_action
from teams.models import Team
from .serializers import ChangeProjectSerializer, CreateProjectSerializer, GetProjectSerializer
from .models import Project


# Вью для создания проекта
class CreateProjectView(CreateAPIView):
    queryset = Project.objects.all()
    serializer_class = CreateProjectSerializer


# Вью для получения информации о "моих" проектах (созданных мной и проектах моих команд)
class GetMyProjectsListView(ListAPIView):
    serializer_class = GetProjectSerializer

    def get_queryset(self):
        return (
            visible_projects(self.request.user.id)
            .select_related('team', 'created_by')
            .order_by('-created_at')
        )


# Вью для получения проектов команды
class GetTeamProjectsView(ListAPIView):
    serializer_class = GetProjectSerializer

    def get_queryset(self):
        team = get_object_or_404(Team, pk=self.kwargs['team_id'])
        require_access(self.request.user, Action.READ, snapshot_team(team))

        return (
            Project.objects.filter(team=team)
            .select_related('team', 'created_by')
            .order_by('-created_at')
        )


# Вью для получения полной информации о проекте
class GetProjectDetailsView(RetrieveAPIView):
    serializer_class = GetProjectSerializer
    queryset = Project.objects.select_related('team', 'created_by')

    def get_object(self):
        project = super().get_object()
        require_access(self.request.user, Action.READ, snapshot_project(project))

        return project


# Вью для изменения информации о проекте
class ChangeProjectView(UpdateAPIView):
    queryset = Project.objects.all()
    serializer_class = ChangeProjectSerializer


# Вью для удаления проекта
class DeleteProjectView(DestroyAPIView):
    queryset = Project.objects.all()

    def perform_destroy(self, instance):
        user = self.request.user

        require_access(
            user,
            Action.DELETE,
            snapshot_project(instance),
            action_name="Проекты",
            description=f"Пользователь послал запрос на удаление проекта «{instance.name}»"
        )
        
        project_name = instance.name

        # Задачи проекта удаляются вместе с ним
        with transaction.atomic():
            lock_for_write(instance, 'project_not_found')
            instance.delete()
        
        log_user_action(
            user=user,
            action_name="Проекты",
            description=f"Создатель удалил проект «{project_name}»"
        )
