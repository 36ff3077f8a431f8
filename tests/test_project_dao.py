import pytest

from webstudio.api.models import InsertProject, ProjectUpdate
from webstudio.database.daos import ProjectDao


@pytest.mark.repository
class TestProjectDao:
    """Test suite for ProjectDao."""

    def test_defaults(self, db_session):
        project = ProjectDao().createProject(db_session, InsertProject(title="Clínica Sorriso"))

        assert project.media_type == "image"
        assert project.is_active is True
        assert project.display_order == 0
        assert project.created_at is not None

    def test_all_projects_sorted_by_display_order(self, db_session):
        dao = ProjectDao()
        for title, order in [("Third", 3), ("First", 1), ("Second", 2)]:
            dao.createProject(db_session, InsertProject(title=title, display_order=order))

        assert [p.title for p in dao.getAllProjects(db_session)] == ["First", "Second", "Third"]

    def test_active_projects_hide_inactive(self, db_session):
        dao = ProjectDao()
        dao.createProject(db_session, InsertProject(title="Visible", display_order=2))
        dao.createProject(db_session, InsertProject(title="Hidden", display_order=1, is_active=False))
        dao.createProject(db_session, InsertProject(title="Video", display_order=0, media_type="video"))

        assert [p.title for p in dao.getActiveProjects(db_session)] == ["Video", "Visible"]

    def test_partial_update(self, db_session):
        dao = ProjectDao()
        project = dao.createProject(
            db_session, InsertProject(title="Loja", description="E-commerce", display_order=4)
        )

        updated = dao.updateProject(db_session, project.id, ProjectUpdate(is_active=False))

        assert updated.is_active is False
        assert updated.title == "Loja"
        assert updated.description == "E-commerce"
        assert updated.display_order == 4

    def test_update_missing_project(self, db_session):
        assert ProjectDao().updateProject(db_session, 8, ProjectUpdate(title="x")) is None

    def test_delete_reports_whether_a_row_was_removed(self, db_session):
        dao = ProjectDao()
        project = dao.createProject(db_session, InsertProject(title="Temporary"))

        assert dao.deleteProject(db_session, 999) is False
        assert dao.deleteProject(db_session, project.id) is True
        assert dao.getProject(db_session, project.id) is None
        assert dao.deleteProject(db_session, project.id) is False
