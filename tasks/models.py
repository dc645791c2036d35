# tasks/models.py

from django.db import models
from projects.models import Project, STATUS_CHOICES, STATUS_TO_DO
from users.models import User
from teams.models import Team
from tags.models import Tag

PRIORITY_CHOICES = [
    ('Low', 'Low'),
    ('Medium', 'Medium'),
    ('High', 'High'),
]


class Task(models.Model):
    name = models.CharField(max_length=150)
    description = models.TextField(blank=True)
    project = models.ForeignKey(
        Project,
        related_name='project_tasks',
        on_delete=models.CASCADE
    )
    team = models.ForeignKey(
        Team,
        related_name='team_tasks',
        on_delete=models.PROTECT
    )
    owners = models.ManyToManyField(
        User,
        related_name='owned_tasks',
        blank=True
    )
    tags = models.ManyToManyField(
        Tag,
        related_name='tag_tasks',
        blank=True
    )
    time_to_complete = models.PositiveIntegerField()
    due_date = models.DateTimeField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_TO_DO)
    priority = models.CharField(max_length=20, choices=PRIORITY_CHOICES, default='Medium')
    created_by = models.ForeignKey(
        User,
        related_name='user_created_tasks',
        on_delete=models.CASCADE
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"Задача '{self.name}' в проекте '{self.project.name}'."
