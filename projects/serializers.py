# projects/serializers.py

from management.permissions import lock_for_write, require_access, snapshot_project
from management.policy import Action, ProjectSnapshot
from rest_framework.exceptions import NotFound
from rest_framework import serializers
from django.db import transaction
from teams.models import Team
from users.utils import *
from .models import *


# Сериализатор для получения информации о проектах
class GetProjectSerializer(serializers.ModelSerializer):
    team_name = serializers.CharField(source='team.name', read_only=True)
    created_by_name = serializers.CharField(source='created_by.name', read_only=True)

    class Meta:
        model = Project
        fields = [
            'id',
            'name',
            'description',
            'status',
            'team',
            'team_name',
            'owner',
            'created_by',
            'created_by_name',
            'created_at',
            'updated_at',
        ]


# Сериализатор для создания проекта
class CreateProjectSerializer(serializers.ModelSerializer):
    team_id = serializers.IntegerField(write_only=True)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, default=STATUS_TO_DO)

    class Meta:
        model = Project
        fields = ['name', 'description', 'team_id', 'status']

    def validate(self, data):
        user = self.context['request'].user
        team = Team.objects.filter(pk=data['team_id']).first()

        if team is None:
            raise NotFound({'team_not_found': 'Команда не найдена.'})

        require_access(
            user,
            Action.CREATE,
            ProjectSnapshot(None, team.id, user.id),
            action_name="Проекты",
            description=f"Пользователь послал запрос на создание проекта в команде «{team.name}»"
        )

        data['team'] = team

        return data
    
    def create(self, validated_data):
        user = self.context['request'].user
        validated_data.pop('team_id')

        project = Project.objects.create(owner=user, created_by=user, **validated_data)

        log_user_action(
            user=user, 
            action_name="Проекты", 
            description=f"Пользователь создал проект «{project.name}»"
        )
        
        return project

    def to_representation(self, instance):
        return GetProjectSerializer(instance, context=self.context).data


# Сериализатор для изменения информации о проекте
class ChangeProjectSerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ['name', 'description', 'status']

    def validate(self, data):
        request = self.context['request']
        project = self.instance

        require_access(
            request.user,
            Action.UPDATE,
            snapshot_project(project),
            action_name="Проекты",
            description=f"Пользователь послал запрос на изменение проекта «{project.name}»"
        )

        return data
    
    def update(self, instance, validated_data):
        fields_changed = any(
            getattr(instance, field) != value for field, value in validated_data.items()
        )

        # Проект мог быть удален после проверки прав
        with transaction.atomic():
            lock_for_write(instance, 'project_not_found')

            if fields_changed:
                instance = super().update(instance, validated_data)

        if fields_changed:
            log_user_action(
                user=self.context['request'].user, 
                action_name="Проекты", 
                description=f"Пользователь изменил проект «{instance.name}»"
            )

        return instance

    def to_representation(self, instance):
        return GetProjectSerializer(instance, context=self.context).data
