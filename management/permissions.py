# management/permissions.py

from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework.permissions import BasePermission
from users.utils import log_user_action, ACCESS_DENIED_STATUS
from .membership import get_user_team_ids, get_team_member_ids
from .policy import (
    AccessContext, Decision, ProjectSnapshot, TaskSnapshot, TeamSnapshot, authorize,
)

REASON_MESSAGES = {
    'not_found': 'Объект не найден.',
    'team_not_found': 'Команда не найдена.',
    'project_not_found': 'Проект не найден.',
    'task_not_found': 'Задача не найдена.',
    'not_team_member': 'Вы не состоите в этой команде.',
    'not_team_owner': 'Только владелец команды может выполнить это действие.',
    'not_creator': 'Только создатель проекта может выполнить это действие.',
    'not_task_participant': 'Действие доступно только создателю и исполнителям задачи.',
    'user_not_found': 'Пользователь не найден.',
    'already_member': 'Пользователь уже состоит в команде.',
    'team_required': 'Для проекта необходимо указать команду.',
    'project_team_mismatch': 'Проект не принадлежит этой команде.',
    'owners_not_members': 'Один или несколько исполнителей не состоят в команде.',
    'unsupported_action': 'Действие не поддерживается.',
}


def snapshot_team(team):
    if team is None:
        return None
    return TeamSnapshot(team.id, team.owner_id, frozenset(get_team_member_ids(team)))


def snapshot_project(project):
    if project is None:
        return None
    return ProjectSnapshot(project.id, project.team_id, project.created_by_id)


def snapshot_task(task):
    if task is None:
        return None
    return TaskSnapshot(
        task.id,
        task.team_id,
        task.project.team_id,
        task.created_by_id,
        frozenset(task.owners.values_list('id', flat=True)),
    )


def require_access(user, action, resource, context=None, action_name=None, description=None):
    """
    Проверяет доступ по правилам management.policy и поднимает исключение DRF,
    если действие не разрешено. Отказ в правах записывается в журнал действий.
    """
    if context is None:
        context = AccessContext(team_ids=get_user_team_ids(user.id))

    verdict = authorize(user.id, action, resource, context)

    if verdict.allowed:
        return

    detail = {verdict.reason: REASON_MESSAGES[verdict.reason]}

    if verdict.decision is Decision.NOT_FOUND:
        raise NotFound(detail)

    if verdict.decision is Decision.BAD_REQUEST:
        raise ValidationError(detail)

    if action_name:
        log_user_action(
            user=user,
            action_name=action_name,
            description=description,
            status=ACCESS_DENIED_STATUS
        )
    raise PermissionDenied(detail)


def lock_for_write(instance, reason):
    """
    Повторно находит запись перед изменением и блокирует ее до конца транзакции.
    Вызывается внутри transaction.atomic().
    """
    locked = type(instance).objects.select_for_update().filter(pk=instance.pk).first()

    if locked is None:
        raise NotFound({reason: REASON_MESSAGES[reason]})

    return locked


class IsAdmin(BasePermission):
    def has_permission(self, request, view):
        if request.user.is_admin:
            return True
        return False
