# teams/models.py

from django.db import models
from users.models import User


class Team(models.Model):
    name = models.CharField(max_length=150, unique=True)
    description = models.TextField(blank=True)
    owner = models.ForeignKey(
        User,
        related_name='user_owned_teams',
        on_delete=models.CASCADE
    )
    members = models.ManyToManyField(
        User,
        through='User_team',
        related_name='teams'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name


class User_team(models.Model):
    team = models.ForeignKey(
        Team,
        related_name='team_users',
        on_delete=models.CASCADE
    )
    user = models.ForeignKey(
        User,
        related_name='user_teams',
        on_delete=models.CASCADE
    )
    date_joined_team = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['team', 'user'], name='unique_team_member'),
        ]

    def __str__(self):
        return f"Пользователь {self.user.name} в команде '{self.team.name}'."
