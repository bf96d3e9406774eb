"""Tests for milestone and project totals."""

import pytest

from pertplan.domain.estimation import (
    milestone_breakdown,
    milestone_total,
    project_summary,
    project_total,
)
from pertplan.domain.project import Milestone, Project


class TestMilestoneTotal:
    def test_includes_management_task(self, make_task):
        milestone = Milestone(id="A", tasks=[make_task("A1", o=10, m=20, p=30)])
        assert milestone_total(milestone) == pytest.approx(23.0)

    def test_disabled_milestone_totals_zero(self, make_task):
        milestone = Milestone(id="A", is_enabled=False, tasks=[make_task("A1", o=10, m=20, p=30)])
        assert milestone_total(milestone) == 0
        assert milestone_breakdown(milestone) == []

    def test_disabled_tasks_excluded(self, sample_project):
        milestone = sample_project.milestones[0]
        # 20 + 4 + management 3.6
        assert milestone_total(milestone) == pytest.approx(27.6)

    def test_management_named_task_counts_in_total(self, make_task):
        milestone = Milestone(
            id="A",
            tasks=[
                make_task("A1", o=10, m=20, p=30),
                make_task("A2", "Project Management - kickoff", o=6, m=6, p=6),
            ],
        )
        # 20 + 6, overhead on 20 only
        assert milestone_total(milestone) == pytest.approx(29.0)

    def test_empty_milestone(self):
        assert milestone_total(Milestone(id="A")) == 0

    def test_breakdown_order(self, sample_project):
        items = milestone_breakdown(sample_project.milestones[0])
        assert [item.task.id for item in items] == ["A1", "A3", "A-mgmt"]
        assert [item.expected for item in items] == pytest.approx([20.0, 4.0, 3.6])


class TestProjectTotal:
    def test_sum_of_milestones(self, sample_project):
        assert project_total(sample_project) == pytest.approx(27.6)

    def test_disabling_milestone_cascades(self, sample_project):
        enabled_b = sample_project.model_copy(
            update={
                "milestones": [
                    sample_project.milestones[0],
                    sample_project.milestones[1].model_copy(update={"is_enabled": True}),
                ]
            }
        )
        # B: 6 + management on ceil(6) = 0.6/0.9/1.2 -> 0.9
        assert project_total(enabled_b) == pytest.approx(27.6 + 6.9)

    def test_empty_project(self):
        assert project_total(Project(milestones=[])) == 0


class TestProjectSummary:
    def test_summary(self, sample_project):
        summary = project_summary(sample_project)

        assert summary.client_name == "Acme"
        assert summary.project_name == "Website"
        assert [m.id for m in summary.milestones] == ["A", "B"]
        assert summary.milestones[0].task_count == 3
        assert summary.milestones[0].enabled_task_count == 2
        assert summary.milestones[0].total == pytest.approx(27.6)
        assert summary.milestones[1].is_enabled is False
        assert summary.milestones[1].total == 0
        assert summary.grand_total == pytest.approx(project_total(sample_project))
