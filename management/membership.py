# management/membership.py

from django.db.models import Q
from teams.models import Team, User_team


def get_user_team_ids(user_id):
    """
    Возвращает id команд, в которых состоит пользователь (участник или владелец).

    Значение вычисляется заново при каждом вызове: состав команд может
    измениться между запросами.
    """
    return set(
        Team.objects.filter(Q(members=user_id) | Q(owner=user_id)).values_list('id', flat=True)
    )


def get_team_member_ids(team):
    """
    Возвращает id участников команды, включая владельца.
    """
    member_ids = set(User_team.objects.filter(team=team).values_list('user_id', flat=True))
    member_ids.add(team.owner_id)

    return member_ids
