"""End-to-end flows through the API, from team creation to task assignment."""

from datetime import timedelta

from django.urls import reverse
from django.utils.timezone import now

from teams.models import Team


def test_team_project_and_task_flow(client_for, alice, bob, carol):
    as_alice, as_bob = client_for(alice), client_for(bob)

    response = as_alice.post(reverse("create-team"), {"name": "Eng"})
    assert response.status_code == 201
    team = Team.objects.get(name="Eng")

    response = as_alice.post(reverse("team-add-member"), {"team_id": team.id, "user_id": bob.id})
    assert response.status_code == 200

    response = as_bob.post(reverse("create-project"), {"name": "Backend", "team_id": team.id})
    assert response.status_code == 201
    project_id = response.data["id"]

    response = as_alice.delete(reverse("delete-project", args=[project_id]))
    assert response.status_code == 403
    assert "not_creator" in response.data

    task = {
        "name": "Write API",
        "project_id": project_id,
        "team_id": team.id,
        "time_to_complete": 2,
        "due_date": (now() + timedelta(days=1)).isoformat(),
    }

    response = as_alice.post(reverse("create-task"), {**task, "owners": [bob.id]})
    assert response.status_code == 201

    response = as_alice.post(reverse("create-task"), {**task, "owners": [carol.id]})
    assert response.status_code == 400
    assert "owners_not_members" in response.data


def test_outsider_cannot_reach_team_resources(client_for, make_project, make_task, alice, bob, carol, eng):
    project = make_project(eng, alice)
    task = make_task(project, alice, owners=[bob])
    as_carol = client_for(carol)

    assert as_carol.get(reverse("get-team-details", args=[eng.id])).status_code == 403
    assert as_carol.get(reverse("get-project-details", args=[project.id])).status_code == 403
    assert as_carol.get(reverse("get-task-details", args=[task.id])).status_code == 403
    assert as_carol.get(reverse("get-my-projects-list")).data == []
    assert as_carol.get(reverse("get-my-tasks")).data == []


def test_new_member_gains_team_visibility(client_for, make_project, alice, carol, eng):
    project = make_project(eng, alice)
    as_carol = client_for(carol)

    assert as_carol.get(reverse("get-project-details", args=[project.id])).status_code == 403

    client_for(alice).post(reverse("team-add-member"), {"team_id": eng.id, "user_id": carol.id})

    assert as_carol.get(reverse("get-project-details", args=[project.id])).status_code == 200
