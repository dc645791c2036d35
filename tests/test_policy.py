"""Tests for the pure ownership policy engine."""

import pytest

from management.policy import (
    AccessContext,
    Action,
    Decision,
    ProjectSnapshot,
    TaskSnapshot,
    TeamSnapshot,
    authorize,
)

OWNER, MEMBER, OUTSIDER, TARGET = 1, 2, 3, 4
TEAM = TeamSnapshot(id=10, owner_id=OWNER, member_ids=frozenset({OWNER, MEMBER}))


def member_of(*team_ids, **kwargs):
    return AccessContext(team_ids=team_ids, **kwargs)


class TestMissingResource:
    @pytest.mark.parametrize("action", list(Action))
    def test_missing_resource_is_not_found_before_any_rule(self, action):
        verdict = authorize(OWNER, action, None, member_of(10))
        assert verdict.decision is Decision.NOT_FOUND
        assert verdict.reason == "not_found"

    def test_unknown_resource_type_is_rejected(self):
        with pytest.raises(TypeError):
            authorize(OWNER, Action.READ, object(), member_of())


class TestTeamRules:
    def test_any_principal_can_create_team(self):
        draft = TeamSnapshot(None, OUTSIDER, frozenset())
        assert authorize(OUTSIDER, Action.CREATE, draft).allowed

    def test_member_can_read_team(self):
        assert authorize(MEMBER, Action.READ, TEAM, member_of(10)).allowed

    def test_non_member_cannot_read_team(self):
        verdict = authorize(OUTSIDER, Action.READ, TEAM, member_of(99))
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "not_team_member"

    def test_owner_adds_new_member(self):
        context = member_of(10, target_user_id=TARGET)
        assert authorize(OWNER, Action.ADD_MEMBER, TEAM, context).allowed

    def test_non_owner_member_cannot_add_member(self):
        context = member_of(10, target_user_id=TARGET)
        verdict = authorize(MEMBER, Action.ADD_MEMBER, TEAM, context)
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "not_team_owner"

    def test_owner_check_precedes_target_lookup(self):
        verdict = authorize(MEMBER, Action.ADD_MEMBER, TEAM, member_of(10, target_user_id=None))
        assert verdict.decision is Decision.FORBIDDEN

    def test_missing_target_user_is_not_found(self):
        verdict = authorize(OWNER, Action.ADD_MEMBER, TEAM, member_of(10, target_user_id=None))
        assert verdict.decision is Decision.NOT_FOUND
        assert verdict.reason == "user_not_found"

    @pytest.mark.parametrize("target", [OWNER, MEMBER])
    def test_existing_member_cannot_be_added_twice(self, target):
        verdict = authorize(OWNER, Action.ADD_MEMBER, TEAM, member_of(10, target_user_id=target))
        assert verdict.decision is Decision.BAD_REQUEST
        assert verdict.reason == "already_member"

    def test_only_owner_deletes_team(self):
        assert authorize(OWNER, Action.DELETE, TEAM, member_of(10)).allowed
        assert authorize(MEMBER, Action.DELETE, TEAM, member_of(10)).decision is Decision.FORBIDDEN

    def test_team_update_is_not_supported(self):
        verdict = authorize(OWNER, Action.UPDATE, TEAM, member_of(10))
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "unsupported_action"


class TestProjectRules:
    project = ProjectSnapshot(id=5, team_id=10, created_by_id=MEMBER)

    def test_member_creates_project_in_own_team(self):
        draft = ProjectSnapshot(None, 10, MEMBER)
        assert authorize(MEMBER, Action.CREATE, draft, member_of(10)).allowed

    def test_non_member_cannot_create_project(self):
        draft = ProjectSnapshot(None, 10, OUTSIDER)
        verdict = authorize(OUTSIDER, Action.CREATE, draft, member_of(11))
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "not_team_member"

    def test_project_requires_team(self):
        draft = ProjectSnapshot(None, None, MEMBER)
        assert authorize(MEMBER, Action.CREATE, draft, member_of(10)).decision is Decision.BAD_REQUEST

    def test_creator_and_team_members_read_project(self):
        assert authorize(MEMBER, Action.READ, self.project, member_of()).allowed
        assert authorize(OWNER, Action.READ, self.project, member_of(10)).allowed

    def test_outsider_cannot_read_project(self):
        assert authorize(OUTSIDER, Action.READ, self.project, member_of(11)).decision is Decision.FORBIDDEN

    @pytest.mark.parametrize("action", [Action.UPDATE, Action.DELETE])
    def test_only_creator_mutates_project(self, action):
        assert authorize(MEMBER, action, self.project, member_of(10)).allowed

        verdict = authorize(OWNER, action, self.project, member_of(10))
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "not_creator"


class TestTaskRules:
    task = TaskSnapshot(id=7, team_id=10, project_team_id=10, created_by_id=OWNER, owner_ids=frozenset({MEMBER}))

    def creation_context(self, *team_ids):
        return member_of(*team_ids, team_member_ids={OWNER, MEMBER})

    def test_member_creates_task_for_team_members(self):
        draft = TaskSnapshot(None, 10, 10, OWNER, frozenset({MEMBER}))
        assert authorize(OWNER, Action.CREATE, draft, self.creation_context(10)).allowed

    def test_task_without_owners_is_allowed(self):
        draft = TaskSnapshot(None, 10, 10, OWNER, frozenset())
        assert authorize(OWNER, Action.CREATE, draft, self.creation_context(10)).allowed

    def test_non_member_cannot_create_task(self):
        draft = TaskSnapshot(None, 10, 10, OUTSIDER, frozenset())
        verdict = authorize(OUTSIDER, Action.CREATE, draft, self.creation_context(11))
        assert verdict.decision is Decision.FORBIDDEN

    def test_project_must_belong_to_task_team(self):
        draft = TaskSnapshot(None, 10, 11, OWNER, frozenset({MEMBER}))
        verdict = authorize(OWNER, Action.CREATE, draft, self.creation_context(10))
        assert verdict.decision is Decision.BAD_REQUEST
        assert verdict.reason == "project_team_mismatch"

    def test_owners_must_be_team_members(self):
        draft = TaskSnapshot(None, 10, 10, OWNER, frozenset({MEMBER, OUTSIDER}))
        verdict = authorize(OWNER, Action.CREATE, draft, self.creation_context(10))
        assert verdict.decision is Decision.BAD_REQUEST
        assert verdict.reason == "owners_not_members"

    @pytest.mark.parametrize("action", [Action.READ, Action.UPDATE, Action.DELETE])
    def test_creator_and_owners_have_access(self, action):
        assert authorize(OWNER, action, self.task, member_of(10)).allowed
        assert authorize(MEMBER, action, self.task, member_of(10)).allowed

    @pytest.mark.parametrize("action", [Action.READ, Action.UPDATE, Action.DELETE])
    def test_team_membership_alone_gives_no_task_access(self, action):
        verdict = authorize(TARGET, action, self.task, member_of(10))
        assert verdict.decision is Decision.FORBIDDEN
        assert verdict.reason == "not_task_participant"
