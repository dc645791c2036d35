from datetime import timedelta

import pytest
from django.utils.timezone import now
from rest_framework.test import APIClient

from projects.models import Project
from tags.models import Tag
from tasks.models import Task
from teams.models import Team, User_team
from users.models import User


@pytest.fixture
def make_user(db):
    def _make_user(name, email=None, password="secret-pass", **extra):
        user = User(name=name, email=email or f"{name.lower()}@example.com", **extra)
        user.set_password(password)
        user.save()
        return user

    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user("Alice")


@pytest.fixture
def bob(make_user):
    return make_user("Bob")


@pytest.fixture
def carol(make_user):
    return make_user("Carol")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client_for(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client_for


@pytest.fixture
def make_team(db):
    def _make_team(owner, name="Eng", members=()):
        team = Team.objects.create(name=name, owner=owner)
        User_team.objects.create(team=team, user=owner)
        for member in members:
            User_team.objects.create(team=team, user=member)
        return team

    return _make_team


@pytest.fixture
def make_project(db):
    def _make_project(team, created_by, name="Backend", status="To Do"):
        return Project.objects.create(
            name=name,
            team=team,
            owner=created_by,
            created_by=created_by,
            status=status,
        )

    return _make_project


@pytest.fixture
def make_task(db):
    def _make_task(project, created_by, owners=(), name="Write API", status="To Do", completed_at=None, tags=()):
        task = Task.objects.create(
            name=name,
            project=project,
            team=project.team,
            created_by=created_by,
            time_to_complete=3,
            due_date=now() + timedelta(days=3),
            status=status,
            completed_at=completed_at,
        )
        task.owners.set(owners)
        task.tags.set(tags)
        return task

    return _make_task


@pytest.fixture
def eng(make_team, alice, bob):
    """Команда Eng: владелец Alice, участник Bob."""
    return make_team(alice, "Eng", members=[bob])


@pytest.fixture
def backend_tag(db):
    return Tag.objects.create(name="backend", color="#3366ff")
