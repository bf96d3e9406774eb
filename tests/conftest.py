"""Shared fixtures for pertplan tests."""

import pytest

from pertplan.domain.project import Estimates, Milestone, Project, QAndAEntry, Task


def build_task(
    task_id: str,
    name: str = "Task",
    o: float = 0,
    m: float = 0,
    p: float = 0,
    enabled: bool = True,
    **fields,
) -> Task:
    return Task(
        id=task_id,
        name=name,
        estimates=Estimates(optimistic=o, most_likely=m, pessimistic=p),
        is_enabled=enabled,
        **fields,
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep settings out of the real home directory."""
    monkeypatch.setenv("PERTPLAN_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("PERTPLAN_FILE", raising=False)
    monkeypatch.delenv("PERTPLAN_DEBUG", raising=False)


@pytest.fixture
def make_task():
    """Factory for tasks with three-point estimates."""
    return build_task


@pytest.fixture
def sample_project() -> Project:
    """Two milestones with a mix of enabled and disabled tasks.

    Milestone A (enabled):
        A1 Design      10/20/30 -> E 20
        A2 Build        1/2/3   -> E 2   (disabled)
        A3 Review       0/6/0   -> E 4
      management base ceil(24) = 24 -> 2.4/3.6/4.8 -> E 3.6
    Milestone B (disabled):
        B1 Deploy       6/6/6   -> E 6
    """
    return Project(
        client_name="Acme",
        project_name="Website",
        milestones=[
            Milestone(
                id="A",
                name="Discovery",
                is_enabled=True,
                tasks=[
                    build_task(
                        "A1",
                        "Design",
                        10,
                        20,
                        30,
                        description="Wireframes",
                        tests="Review with client",
                        definition_of_done="Signed off",
                        q_and_a=[QAndAEntry(question="Mobile?", answer="Yes")],
                    ),
                    build_task("A2", "Build", 1, 2, 3, enabled=False),
                    build_task("A3", "Review", 0, 6, 0),
                ],
            ),
            Milestone(
                id="B",
                name="Launch",
                is_enabled=False,
                tasks=[build_task("B1", "Deploy", 6, 6, 6)],
            ),
        ],
        remarks="Internal only",
    )
