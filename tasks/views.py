# tasks/views.py

from rest_framework.generics import CreateAPIView, ListAPIView, RetrieveAPIView, UpdateAPIView, DestroyAPIView
from management.permissions import lock_for_write, require_access, snapshot_project, snapshot_task
from management.visibility import visible_tasks
from django.shortcuts import get_object_or_404
from management.policy import Action
from django.db import transaction
from users.utils import log_user_action
from projects.models import Project
from .serializers import ChangeTaskSerializer, CreateTaskSerializer, GetTaskSerializer
from .models import Task

TASK_RELATIONS = ('project', 'team', 'created_by')


# Вью для создания задачи
class CreateTaskView(CreateAPIView):
    queryset = Task.objects.all()
    serializer_class = CreateTaskSerializer


# Вью для получения "моих" задач (созданных мной или порученных мне)
class GetMyTasksView(ListAPIView):
    serializer_class = GetTaskSerializer

    def get_queryset(self):
        return (
            visible_tasks(self.request.user.id)
            .select_related(*TASK_RELATIONS)
            .prefetch_related('owners', 'tags')
            .order_by('due_date')
        )


# Вью для получения задач проекта, доступных пользователю
class GetProjectTasksView(ListAPIView):
    serializer_class = GetTaskSerializer

    def get_queryset(self):
        user = self.request.user
        project = get_object_or_404(Project, pk=self.kwargs['project_id'])
        require_access(user, Action.READ, snapshot_project(project))

        return (
            visible_tasks(user.id)
            .filter(project=project)
            .select_related(*TASK_RELATIONS)
            .prefetch_related('owners', 'tags')
            .order_by('due_date')
        )


# Вью для получения полной информации о задаче
class GetTaskDetailsView(RetrieveAPIView):
    serializer_class = GetTaskSerializer
    queryset = Task.objects.select_related(*TASK_RELATIONS)

    def get_object(self):
        task = super().get_object()
        require_access(self.request.user, Action.READ, snapshot_task(task))

        return task


# Вью для изменения тегов, статуса и приоритета задачи
class ChangeTaskView(UpdateAPIView):
    queryset = Task.objects.select_related(*TASK_RELATIONS)
    serializer_class = ChangeTaskSerializer


# Вью для удаления задачи
class DeleteTaskView(DestroyAPIView):
    queryset = Task.objects.select_related(*TASK_RELATIONS)

    def perform_destroy(self, instance):
        user = self.request.user

        require_access(
            user,
            Action.DELETE,
            snapshot_task(instance),
            action_name="Задачи",
            description=f"Пользователь послал запрос на удаление задачи «{instance.name}»"
        )
        
        task_name = instance.name

        with transaction.atomic():
            lock_for_write(instance, 'task_not_found')
            instance.delete()

        log_user_action(
            user=user, 
            action_name="Задачи", 
            description=f"Пользователь удалил задачу «{task_name}»."
        )
