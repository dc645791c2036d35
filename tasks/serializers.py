# tasks/serializers.py

from management.permissions import lock_for_write, require_access, snapshot_task
from management.membership import get_user_team_ids, get_team_member_ids
from management.policy import AccessContext, Action, TaskSnapshot
from projects.models import STATUS_COMPLETED
from rest_framework.exceptions import NotFound
from rest_framework import serializers
from django.utils.timezone import now
from django.db import transaction
from users.utils import *
from .models import *


def completion_time(previous_status, new_status, completed_at):
    """
    Возвращает отметку времени завершения задачи после смены статуса.
    """
    if new_status == previous_status:
        return completed_at
    return now() if new_status == STATUS_COMPLETED else None


# Сериализатор для получения информации о задачах
class GetTaskSerializer(serializers.ModelSerializer):
    project_name = serializers.CharField(source='project.name', read_only=True)
    team_name = serializers.CharField(source='team.name', read_only=True)
    created_by_name = serializers.CharField(source='created_by.name', read_only=True)
    owner_names = serializers.SerializerMethodField()
    tags = serializers.SlugRelatedField(slug_field='name', many=True, read_only=True)

    class Meta:
        model = Task
        fields = ['id', 'name', 'description',
                  'project', 'project_name', 'team', 'team_name',
                  'owners', 'owner_names', 'tags',
                  'time_to_complete', 'due_date', 'status', 'priority',
                  'created_by', 'created_by_name',
                  'created_at', 'updated_at', 'completed_at',
                ]

    def get_owner_names(self, obj):
        return [owner.name for owner in obj.owners.all()]


# Сериализатор для создания задачи
class CreateTaskSerializer(serializers.ModelSerializer):
    project_id = serializers.IntegerField(write_only=True)
    team_id = serializers.IntegerField(write_only=True)
    owners = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        many=True,
        error_messages={'does_not_exist': 'Пользователь не найден, операция невозможна.'}
    )
    tags = serializers.SlugRelatedField(
        slug_field='name',
        queryset=Tag.objects.all(),
        many=True,
        required=False
    )
    time_to_complete = serializers.IntegerField(min_value=1)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, default=STATUS_TO_DO)
    priority = serializers.ChoiceField(choices=PRIORITY_CHOICES, default='Medium')

    class Meta:
        model = Task
        fields = ['name', 'description', 'project_id', 'team_id', 'owners', 'tags',
                  'time_to_complete', 'due_date', 'status', 'priority']

    def validate(self, data):
        user = self.context['request'].user

        team = Team.objects.filter(pk=data['team_id']).first()

        if team is None:
            raise NotFound({'team_not_found': 'Команда не найдена.'})

        project = Project.objects.filter(pk=data['project_id']).first()

        if project is None:
            raise NotFound({'project_not_found': 'Проект не найден.'})

        context = AccessContext(
            team_ids=get_user_team_ids(user.id),
            team_member_ids=get_team_member_ids(team),
        )
        proposed_task = TaskSnapshot(
            None,
            team.id,
            project.team_id,
            user.id,
            frozenset(owner.id for owner in data['owners']),
        )
        require_access(
            user,
            Action.CREATE,
            proposed_task,
            context,
            action_name="Задачи",
            description=f"Пользователь послал запрос на добавление задачи в проект «{project.name}»"
        )

        data['team'] = team
        data['project'] = project

        return data
    
    def create(self, validated_data):
        user = self.context['request'].user
        validated_data.pop('team_id')
        validated_data.pop('project_id')
        owners = validated_data.pop('owners')
        tags = validated_data.pop('tags', [])

        if validated_data['status'] == STATUS_COMPLETED:
            validated_data['completed_at'] = now()

        with transaction.atomic():
            task = Task.objects.create(created_by=user, **validated_data)
            task.owners.set(owners)
            task.tags.set(tags)

        log_user_action(
            user=user,
            action_name="Задачи",
            description=f"Пользователь создал задачу «{task.name}»"
        )

        send_mail_notification(
            users=[owner for owner in owners if owner != user],
            header="Новая задача",
            text=f"Обнаружена новая порученная Вам задача «{task.name}» в проекте «{task.project.name}»."
        )

        return task

    def to_representation(self, instance):
        return GetTaskSerializer(instance, context=self.context).data


# Сериализатор для изменения тегов, статуса и приоритета задачи
class ChangeTaskSerializer(serializers.ModelSerializer):
    tags = serializers.SlugRelatedField(
        slug_field='name',
        queryset=Tag.objects.all(),
        many=True,
        required=False
    )

    class Meta:
        model = Task
        fields = ['tags', 'status', 'priority']

    def validate(self, data):
        request = self.context['request']
        task = self.instance

        require_access(
            request.user,
            Action.UPDATE,
            snapshot_task(task),
            action_name="Задачи",
            description=f"Пользователь послал запрос на изменение задачи «{task.name}»"
        )

        return data
    
    def update(self, instance, validated_data):
        previous_status = instance.status

        if 'status' in validated_data:
            validated_data['completed_at'] = completion_time(
                previous_status, validated_data['status'], instance.completed_at
            )

        # Задача могла быть удалена после проверки прав
        with transaction.atomic():
            lock_for_write(instance, 'task_not_found')
            instance = super().update(instance, validated_data)

        user = self.context['request'].user

        log_user_action(
            user=user, 
            action_name="Задачи", 
            description=f"Пользователь изменил задачу «{instance.name}»"
        )

        if instance.status != previous_status:
            send_mail_notification(
                users=[owner for owner in instance.owners.all() if owner != user],
                header="Изменение статуса в задаче",
                text=f"Изменился статус задачи «{instance.name}» проекта «{instance.project.name}»."
            )

        return instance

    def to_representation(self, instance):
        return GetTaskSerializer(instance, context=self.context).data
