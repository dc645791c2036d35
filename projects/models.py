# projects/models.py

from django.db import models
from teams.models import Team
from users.models import User

STATUS_TO_DO = 'To Do'
STATUS_IN_PROGRESS = 'In-progress'
STATUS_COMPLETED = 'Completed'
STATUS_BLOCKED = 'Blocked'

STATUS_CHOICES = [
    (STATUS_TO_DO, 'To Do'),
    (STATUS_IN_PROGRESS, 'In-progress'),
    (STATUS_COMPLETED, 'Completed'),
    (STATUS_BLOCKED, 'Blocked'),
]


class Project(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    team = models.ForeignKey(
        Team,
        related_name='team_projects',
        on_delete=models.PROTECT
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_TO_DO)
    owner = models.ForeignKey(
        User,
        related_name='user_owned_projects',
        on_delete=models.CASCADE
    )
    created_by = models.ForeignKey(
        User,
        related_name='user_created_projects',
        on_delete=models.CASCADE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name
