"""Tests for the dashboard summary and the weekly report."""

from datetime import timedelta

from django.urls import reverse
from django.utils.timezone import now


class TestDashboardStats:
    def test_counts_visible_projects_and_tasks(self, client_for, make_project, make_task, alice, bob, eng):
        first = make_project(eng, alice, "Backend")
        make_project(eng, alice, "Frontend", status="In-progress")
        make_project(eng, bob, "Docs")

        for name in ("one", "two", "three"):
            make_task(first, alice, name=name, status="Completed", completed_at=now())
        make_task(first, alice, name="four", status="In-progress")
        make_task(first, bob, owners=[alice], name="five")
        make_task(first, bob, name="not mine")

        response = client_for(alice).get(reverse("dashboard-stats"))

        assert response.status_code == 200
        assert response.data["projects"] == 3
        assert response.data["created_projects"] == 2
        assert response.data["tasks"] == 5
        assert response.data["created_tasks"] == 4
        assert response.data["completed"] == 3
        assert response.data["in_progress"] == 1
        assert {row["status"]: row["count"] for row in response.data["tasks_by_status"]} == {
            "Completed": 3,
            "In-progress": 1,
            "To Do": 1,
        }
        assert {row["status"]: row["count"] for row in response.data["projects_by_status"]} == {
            "To Do": 2,
            "In-progress": 1,
        }

    def test_task_with_several_owners_is_counted_once(self, client_for, make_project, make_task, alice, bob, eng):
        project = make_project(eng, alice)
        make_task(project, alice, owners=[alice, bob])

        response = client_for(alice).get(reverse("dashboard-stats"))

        assert response.data["tasks"] == 1

    def test_empty_dashboard(self, client_for, carol):
        response = client_for(carol).get(reverse("dashboard-stats"))

        assert response.status_code == 200
        assert response.data["projects"] == 0
        assert response.data["tasks"] == 0
        assert response.data["tasks_by_status"] == []


class TestReportOverview:
    def test_report_counts_tasks_closed_in_last_week(self, client_for, make_project, make_task, alice, bob, eng):
        project = make_project(eng, alice)
        make_task(project, alice, owners=[bob], name="recent", status="Completed", completed_at=now() - timedelta(days=2))
        make_task(project, alice, owners=[bob], name="old", status="Completed", completed_at=now() - timedelta(days=10))
        make_task(project, alice, owners=[alice], name="open")

        response = client_for(alice).get(reverse("reports-overview"))

        assert response.status_code == 200
        assert response.data["completed_last_week"] == 1
        assert response.data["pending_tasks"] == 1
        assert response.data["closed_by_team"] == [{"team_id": eng.id, "team_name": "Eng", "count": 1}]
        assert response.data["closed_by_owner"] == [{"owner_id": bob.id, "owner_name": "Bob", "count": 1}]

    def test_report_is_limited_to_my_teams(self, client_for, make_team, make_project, make_task, alice, carol, eng):
        ops = make_team(carol, "Ops")
        project = make_project(ops, carol)
        make_task(project, carol, status="Completed", completed_at=now())

        response = client_for(alice).get(reverse("reports-overview"))

        assert response.data["completed_last_week"] == 0
        assert response.data["closed_by_team"] == []

    def test_tasks_without_owners_are_left_out_of_owner_grouping(self, client_for, make_project, make_task, alice, eng):
        project = make_project(eng, alice)
        make_task(project, alice, status="Completed", completed_at=now())

        response = client_for(alice).get(reverse("reports-overview"))

        assert response.data["completed_last_week"] == 1
        assert response.data["closed_by_owner"] == []
