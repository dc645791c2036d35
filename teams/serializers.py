# teams/serializers.py

from management.permissions import require_access, snapshot_team
from management.membership import get_user_team_ids
from management.policy import AccessContext, Action
from management.exceptions import Conflict
from rest_framework.exceptions import NotFound
from rest_framework import serializers
from django.db import transaction
from users.models import User
from users.utils import *
from .models import *


# Сериализатор для краткой информации об участнике команды
class TeamMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email']


# Сериализатор для получения информации о команде
class GetTeamSerializer(serializers.ModelSerializer):
    owner = TeamMemberSerializer(read_only=True)
    members = TeamMemberSerializer(many=True, read_only=True)

    class Meta:
        model = Team
        fields = ['id', 'name', 'description', 'owner', 'members', 'created_at', 'updated_at']


# Сериализатор для создания команды
class CreateTeamSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=150)

    class Meta:
        model = Team
        fields = ['id', 'name', 'description', 'owner']
        read_only_fields = ['id', 'owner']

    def validate(self, data):
        if Team.objects.filter(name=data['name']).exists():
            raise Conflict({'team_name_taken': 'Команда с таким названием уже существует.'})

        return data

    def create(self, validated_data):
        owner = self.context['request'].user

        # Владелец сразу становится первым участником команды
        with transaction.atomic():
            team = Team.objects.create(owner=owner, **validated_data)
            User_team.objects.create(team=team, user=owner)

        log_user_action(
            user=owner,
            action_name="Команды",
            description=f"Пользователь создал команду «{team.name}»"
        )

        return team


# Сериализатор для добавления пользователя в команду
class AddTeamMemberSerializer(serializers.Serializer):
    team_id = serializers.IntegerField()
    user_id = serializers.IntegerField(required=False)
    email = serializers.EmailField(required=False)

    def validate(self, data):
        requesting_user = self.context['request'].user

        if data.get('user_id') is None and not data.get('email'):
            raise serializers.ValidationError({'no_user': 'Укажите user_id или email пользователя.'})

        team = Team.objects.filter(pk=data['team_id']).first()

        if team is None:
            raise NotFound({'team_not_found': 'Команда не найдена.'})

        if data.get('user_id') is not None:
            user = User.objects.filter(pk=data['user_id']).first()
        else:
            user = User.objects.filter(email__iexact=data['email']).first()

        context = AccessContext(
            team_ids=get_user_team_ids(requesting_user.id),
            target_user_id=user.id if user else None,
        )
        require_access(
            requesting_user,
            Action.ADD_MEMBER,
            snapshot_team(team),
            context,
            action_name="Команды",
            description=f"Пользователь послал запрос на добавление участника в команду «{team.name}»"
        )

        data['team'] = team
        data['user'] = user

        return data

    def create(self, validated_data):
        team = validated_data['team']
        user = validated_data['user']
        requesting_user = self.context['request'].user

        # Команда могла быть удалена после проверки прав
        if not Team.objects.filter(pk=team.pk).exists():
            raise NotFound({'team_not_found': 'Команда не найдена.'})

        User_team.objects.create(team=team, user=user)

        log_user_action(
            user=requesting_user,
            action_name="Команды",
            description=f"Владелец добавил {user.name} в команду «{team.name}»"
        )

        send_mail_notification(
            users=[user],
            header="Вступление в команду",
            text=f"Вас добавили в команду «{team.name}»."
        )

        return team
