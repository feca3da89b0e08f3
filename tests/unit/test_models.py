"""Tests for cruisewatch data models — frozen, validated, enum helpers."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from cruisewatch.models.project import ProjectConfiguration, ProjectState
from cruisewatch.models.status import (
    IntegrationStatus,
    ProjectActivity,
    ProjectIntegratorState,
    ProjectStatus,
)
from cruisewatch.models.transitions import PollTransition


class TestProjectActivity:
    def test_building_and_pending_are_building(self):
        assert ProjectActivity.BUILDING.is_building()
        assert ProjectActivity.PENDING.is_building()
        assert not ProjectActivity.SLEEPING.is_building()
        assert not ProjectActivity.CHECKING_MODIFICATIONS.is_building()

    def test_is_pending(self):
        assert ProjectActivity.PENDING.is_pending()
        assert not ProjectActivity.BUILDING.is_pending()

    def test_is_sleeping(self):
        assert ProjectActivity.SLEEPING.is_sleeping()
        assert not ProjectActivity.CHECKING_MODIFICATIONS.is_sleeping()

    def test_values_match_feed_strings(self):
        assert ProjectActivity("CheckingModifications") is ProjectActivity.CHECKING_MODIFICATIONS


class TestProjectStatus:
    def test_minimal_status_defaults(self):
        status = ProjectStatus(name="app", activity=ProjectActivity.SLEEPING)
        assert status.build_status == IntegrationStatus.UNKNOWN
        assert status.integrator_state == ProjectIntegratorState.UNKNOWN
        assert status.last_build_label == ""
        assert status.last_build_date is None
        assert status.current_message == ""

    def test_status_is_frozen(self, make_status):
        status = make_status()
        with pytest.raises(ValidationError):
            status.activity = ProjectActivity.BUILDING  # type: ignore[misc]

    def test_status_parses_strings(self):
        status = ProjectStatus.model_validate(
            {
                "name": "app",
                "activity": "Building",
                "build_status": "Failure",
                "integrator_state": "Stopped",
                "last_build_date": "2026-02-27T12:00:00",
            }
        )
        assert status.activity == ProjectActivity.BUILDING
        assert status.build_status == IntegrationStatus.FAILURE
        assert status.integrator_state == ProjectIntegratorState.STOPPED
        assert status.last_build_date == datetime(2026, 2, 27, 12, 0, 0)

    def test_unknown_activity_rejected(self):
        with pytest.raises(ValidationError):
            ProjectStatus(name="app", activity="Dreaming")  # type: ignore[arg-type]

    def test_value_equality(self, make_status):
        assert make_status(current_message="x") == make_status(current_message="x")
        assert make_status(current_message="x") != make_status(current_message="y")


class TestProjectConfiguration:
    def test_frozen(self):
        config = ProjectConfiguration(feed_url="http://ci/cctray.xml", project_name="app")
        assert config.show_project is True
        with pytest.raises(ValidationError):
            config.project_name = "other"  # type: ignore[misc]


class TestProjectState:
    def test_values(self):
        assert ProjectState.NOT_CONNECTED.value == "NotConnected"
        assert ProjectState.BROKEN_AND_BUILDING.value == "BrokenAndBuilding"


class TestPollTransition:
    def test_defaults_are_all_false(self):
        t = PollTransition()
        assert not (t.build_completed or t.build_succeeded)
        assert not (t.build_started or t.new_message_received)
        assert t.build_transition is None
        assert t.latest_message == ""
