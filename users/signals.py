# users/signals.py

from django.db.models.signals import post_migrate
from django.dispatch import receiver
from .models import Action_type

DEFAULT_ACTION_TYPES = [
    "Аккаунты",
    "Команды",
    "Проекты",
    "Задачи",
    "Теги",
]


@receiver(post_migrate)
def create_default_action_types(sender, **kwargs):
    if sender.name != 'users':
        return

    for action in DEFAULT_ACTION_TYPES:
        Action_type.objects.get_or_create(name=action)
