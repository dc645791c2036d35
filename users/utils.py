# users/utils.py

import logging

from django.core.mail import send_mail
from django.conf import settings
from .models import Action_type, User_action

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 'Успешно'
ACCESS_DENIED_STATUS = 'Ошибка прав доступа'


def log_user_action(user, action_name, description, status=SUCCESS_STATUS):
    """
    Функция для записи действий пользователей в системе в таблицу User_action.
    """
    action_type, _ = Action_type.objects.get_or_create(name=action_name)

    User_action.objects.create(
        type=action_type,
        user=user,
        description=description,
        status=status
    )

def send_mail_notification(users, header, text):
    """
    Функция для отправки сообщения на почту указанных пользователей.

    Уведомление отправляется после сохранения изменений, поэтому ошибка
    почтового сервера только записывается в лог и не меняет ответ API.
    """
    for user in users:
        if user.notifications_status:
            try:
                send_mail(
                    header,
                    text,
                    settings.EMAIL_HOST_USER,
                    [user.email],
                    fail_silently=False,
                )
            except OSError:
                logger.exception("Не удалось отправить уведомление «%s» на %s", header, user.email)
