# management/exceptions.py

import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = {'conflict': 'Запись с такими данными уже существует.'}
    default_code = 'conflict'


def api_exception_handler(exc, context):
    """
    Обработчик ошибок API: нарушение уникальности превращается в 409,
    любая непредвиденная ошибка - в общий ответ 500 без подробностей.
    """
    if isinstance(exc, IntegrityError):
        exc = Conflict()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception("Необработанная ошибка в %s", type(view).__name__ if view else 'API', exc_info=exc)
        return Response(
            {'server_error': 'Внутренняя ошибка сервера.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return response
