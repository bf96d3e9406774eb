"""Tests for pertplan.application.session."""

import logging

import pytest

from pertplan.application import ProjectSession
from pertplan.domain.project import (
    AddMilestone,
    AddTask,
    DeleteTask,
    EstimateKind,
    UpdateEstimate,
    initial_project,
)


class TestProjectSession:
    def test_starts_from_initial_project(self):
        assert ProjectSession().project == initial_project()

    def test_starts_from_given_project(self, sample_project):
        assert ProjectSession(sample_project).project is sample_project

    def test_dispatch_replaces_current_project(self):
        session = ProjectSession()
        result = session.dispatch(AddTask(milestone_id="A"))
        assert session.project is result
        assert session.project.milestones[0].tasks[0].id == "A1"

    def test_noop_keeps_same_object(self):
        session = ProjectSession()
        before = session.project
        assert session.dispatch(DeleteTask(milestone_id="A", task_id="A9")) is before

    def test_dispatch_all(self):
        session = ProjectSession()
        project = session.dispatch_all(
            [
                AddMilestone(),
                AddTask(milestone_id="B"),
                *(
                    UpdateEstimate(milestone_id="B", task_id="B1", which=which, value=10)
                    for which in EstimateKind
                ),
            ]
        )
        assert project is session.project
        # 10h of work plus 1.5h management overhead
        assert session.summary().grand_total == pytest.approx(11.5)

    def test_derived_views_follow_current_project(self, sample_project):
        session = ProjectSession(sample_project)
        assert "Design" in session.to_csv()
        assert session.to_report().title == "Acme - Website"
        assert '"projectName": "Website"' in session.to_json()

        session.dispatch(DeleteTask(milestone_id="A", task_id="A1"))
        assert "Design" not in session.to_csv()

    def test_logs_dispatch(self, caplog):
        caplog.set_level(logging.DEBUG, logger="pertplan")
        session = ProjectSession()
        session.dispatch(AddTask(milestone_id="A"))
        session.dispatch(AddTask(milestone_id="Q"))
        assert "Applied AddTask" in caplog.text
        assert "AddTask left the project unchanged" in caplog.text
