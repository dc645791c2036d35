# teams/views.py

from rest_framework.generics import CreateAPIView, GenericAPIView, ListAPIView, RetrieveAPIView, DestroyAPIView
from management.permissions import lock_for_write, require_access, snapshot_team
from management.membership import get_user_team_ids
from management.exceptions import Conflict
from django.db.models import ProtectedError
from rest_framework.response import Response
from management.policy import Action
from rest_framework import status
from django.db import transaction
from users.utils import log_user_action
from .serializers import *
from .models import *


# Вью для получения "моих" команд
class GetMyTeamsView(ListAPIView):
    serializer_class = GetTeamSerializer

    def get_queryset(self):
        team_ids = get_user_team_ids(self.request.user.id)

        return (
            Team.objects.filter(id__in=team_ids)
            .select_related('owner')
            .prefetch_related('members')
            .order_by('-created_at')
        )


# Вью для получения полной информации о команде
class GetTeamDetailsView(RetrieveAPIView):
    serializer_class = GetTeamSerializer
    queryset = Team.objects.all()

    def get_object(self):
        team = super().get_object()
        require_access(self.request.user, Action.READ, snapshot_team(team))

        return team


# Вью для создания команды
class CreateTeamView(CreateAPIView):
    queryset = Team.objects.all()
    serializer_class = CreateTeamSerializer


# Вью для добавления пользователя в команду
class AddTeamMemberView(GenericAPIView):
    serializer_class = AddTeamMemberSerializer

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        team = serializer.save()

        return Response(GetTeamSerializer(team).data, status=status.HTTP_200_OK)


# Вью для удаления команды
class DeleteTeamView(DestroyAPIView):
    queryset = Team.objects.all()

    def perform_destroy(self, instance):
        user = self.request.user

        require_access(
            user,
            Action.DELETE,
            snapshot_team(instance),
            action_name="Команды",
            description=f"Пользователь послал запрос на удаление команды «{instance.name}»"
        )

        # Команду с проектами удалить нельзя: сначала нужно удалить проекты
        conflict = Conflict({'team_has_projects': 'В команде есть проекты, удаление невозможно.'})

        if instance.team_projects.exists():
            raise conflict

        team_name = instance.name

        try:
            with transaction.atomic():
                lock_for_write(instance, 'team_not_found')
                instance.delete()
        except ProtectedError:
            raise conflict

        log_user_action(
            user=user,
            action_name="Команды",
            description=f"Владелец удалил команду «{team_name}»"
        )
