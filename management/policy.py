# management/policy.py

"""
Правила доступа к командам, проектам и задачам.

Модуль не обращается к базе данных и ничего не изменяет: вызывающий код
передает уже полученный снимок ресурса и контекст членства, а в ответ
получает решение (Verdict) с кодом причины.
"""

from collections import namedtuple
from enum import Enum


class Decision(Enum):
    ALLOW = 'allow'
    FORBIDDEN = 'forbidden'
    NOT_FOUND = 'not_found'
    BAD_REQUEST = 'bad_request'


class Action(Enum):
    READ = 'read'
    CREATE = 'create'
    UPDATE = 'update'
    DELETE = 'delete'
    ADD_MEMBER = 'add_member'


class Verdict(namedtuple('Verdict', ['decision', 'reason'])):
    __slots__ = ()

    @property
    def allowed(self):
        return self.decision is Decision.ALLOW


ALLOWED = Verdict(Decision.ALLOW, None)


# Снимки ресурсов: только те поля, от которых зависят правила
TeamSnapshot = namedtuple('TeamSnapshot', ['id', 'owner_id', 'member_ids'])
ProjectSnapshot = namedtuple('ProjectSnapshot', ['id', 'team_id', 'created_by_id'])
TaskSnapshot = namedtuple('TaskSnapshot', ['id', 'team_id', 'project_team_id', 'created_by_id', 'owner_ids'])


class AccessContext:
    """
    Данные, которые правила получают извне.

    team_ids - команды, в которых состоит пользователь (индекс членства);
    team_member_ids - участники команды, в которой создается задача;
    target_user_id - пользователь, которого добавляют в команду,
    или None, если такой пользователь не найден.
    """

    def __init__(self, team_ids=(), team_member_ids=(), target_user_id=None):
        self.team_ids = frozenset(team_ids)
        self.team_member_ids = frozenset(team_member_ids)
        self.target_user_id = target_user_id

    def is_member(self, team_id):
        return team_id is not None and team_id in self.team_ids


def _deny(reason):
    return Verdict(Decision.FORBIDDEN, reason)


def _team_rule(principal_id, action, team, context):
    if action is Action.CREATE:
        return ALLOWED

    if action is Action.READ:
        return ALLOWED if context.is_member(team.id) else _deny('not_team_member')

    if action is Action.ADD_MEMBER:
        if team.owner_id != principal_id:
            return _deny('not_team_owner')

        target_id = context.target_user_id

        if target_id is None:
            return Verdict(Decision.NOT_FOUND, 'user_not_found')

        if target_id == team.owner_id or target_id in team.member_ids:
            return Verdict(Decision.BAD_REQUEST, 'already_member')

        return ALLOWED

    if action is Action.DELETE:
        return ALLOWED if team.owner_id == principal_id else _deny('not_team_owner')

    return _deny('unsupported_action')


def _project_rule(principal_id, action, project, context):
    is_creator = project.created_by_id == principal_id

    if action is Action.CREATE:
        if project.team_id is None:
            return Verdict(Decision.BAD_REQUEST, 'team_required')
        return ALLOWED if context.is_member(project.team_id) else _deny('not_team_member')

    if action is Action.READ:
        if is_creator or context.is_member(project.team_id):
            return ALLOWED
        return _deny('not_team_member')

    if action in (Action.UPDATE, Action.DELETE):
        return ALLOWED if is_creator else _deny('not_creator')

    return _deny('unsupported_action')


def _task_rule(principal_id, action, task, context):
    if action is Action.CREATE:
        if not context.is_member(task.team_id):
            return _deny('not_team_member')

        if task.project_team_id != task.team_id:
            return Verdict(Decision.BAD_REQUEST, 'project_team_mismatch')

        if not frozenset(task.owner_ids) <= context.team_member_ids:
            return Verdict(Decision.BAD_REQUEST, 'owners_not_members')

        return ALLOWED

    # Чтение, изменение и удаление доступны создателю и исполнителям задачи
    if action in (Action.READ, Action.UPDATE, Action.DELETE):
        if task.created_by_id == principal_id or principal_id in task.owner_ids:
            return ALLOWED
        return _deny('not_task_participant')

    return _deny('unsupported_action')


_RULES = {
    TeamSnapshot: _team_rule,
    ProjectSnapshot: _project_rule,
    TaskSnapshot: _task_rule,
}


def authorize(principal_id, action, resource, context=None):
    """
    Принимает решение о доступе пользователя principal_id к ресурсу.

    Отсутствующий ресурс (None) всегда дает NOT_FOUND, до проверки прав.
    """
    if resource is None:
        return Verdict(Decision.NOT_FOUND, 'not_found')

    try:
        rule = _RULES[type(resource)]
    except KeyError:
        raise TypeError(f"Неизвестный тип ресурса: {type(resource).__name__}")

    return rule(principal_id, action, resource, context or AccessContext())
