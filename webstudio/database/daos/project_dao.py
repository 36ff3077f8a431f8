"""
Project DAO

Purpose
-------
Data-access layer for portfolio `Project` items. Listings are sorted by
`display_order` ascending (ties by id) regardless of insertion order.

Deletes are physical and report whether a row was actually removed.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from webstudio.api.models import InsertProject, ProjectUpdate
from webstudio.database.entities.project import Project
from webstudio.database.helpers.integrity import flush_or_raise

logger = logging.getLogger(__name__)


class ProjectDao:
    """
    Data Access Object (DAO) for managing portfolio Project entities.
    """

    def createProject(self, session: Session, project: InsertProject) -> Project:
        entity = Project(**project.model_dump())
        session.add(entity)
        flush_or_raise(session, "ProjectDao.createProject", refresh=entity)
        return entity

    def getProject(self, session: Session, project_id: int) -> Optional[Project]:
        try:
            return session.get(Project, project_id)
        except SQLAlchemyError as e:
            logger.error("Error in ProjectDao.getProject. Error Message: %s", e)
            raise

    def getAllProjects(self, session: Session) -> List[Project]:
        """All projects by ascending display order."""
        try:
            return (
                session.query(Project)
                .order_by(Project.display_order, Project.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in ProjectDao.getAllProjects. Error Message: %s", e)
            raise

    def getActiveProjects(self, session: Session) -> List[Project]:
        """Projects flagged active, by ascending display order."""
        try:
            return (
                session.query(Project)
                .filter(Project.is_active.is_(True))
                .order_by(Project.display_order, Project.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error("Error in ProjectDao.getActiveProjects. Error Message: %s", e)
            raise

    def updateProject(self, session: Session, project_id: int, changes: ProjectUpdate) -> Optional[Project]:
        """
        Apply a partial update to a project.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        project_id : int
            Primary key of the project.
        changes : ProjectUpdate
            Only fields explicitly set are written.

        Returns
        -------
        Project | None
            The updated project, or None if the id does not exist.
        """
        project = self.getProject(session, project_id)
        if project is None:
            return None
        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(project, field, value)
        flush_or_raise(session, "ProjectDao.updateProject")
        return project

    def deleteProject(self, session: Session, project_id: int) -> bool:
        """
        Physically delete a project.

        Returns
        -------
        bool
            True if a row was removed, False if the id did not exist.
        """
        try:
            deleted = session.query(Project).filter(Project.id == project_id).delete()
        except SQLAlchemyError as e:
            logger.error("Error in ProjectDao.deleteProject. Error Message: %s", e)
            raise
        return deleted > 0
