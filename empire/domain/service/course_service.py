"""Course domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import logfire

from empire.domain.error import NotFoundError
from empire.domain.model import Course
from empire.domain.model.common import utcnow
from empire.domain.repository import CourseRepository
from empire.domain.value import CourseId

from .base import Service


@dataclass
class CoursePage:
    """A page of courses, newest first.

    ``next_cursor`` is the creation time of the last course on the page and
    is only set when more courses follow.
    """

    items: list[Course]
    next_cursor: Optional[datetime]
    has_more: bool
    limit: int


class CourseService(Service):
    """Domain service for course operations."""

    def __init__(self, course_repository: CourseRepository) -> None:
        """Initialize course service.

        Args:
            course_repository: Course repository
        """
        self.course_repository = course_repository

    async def list_page(
        self, limit: int, cursor: Optional[datetime] = None
    ) -> CoursePage:
        """One page of courses created before ``cursor``.

        Args:
            limit: Page size, already clamped by the caller
            cursor: ``next_cursor`` of the previous page
        """
        with logfire.span(
            "course_service.list_page",
            limit=limit,
            cursor=cursor.isoformat() if cursor else None,
        ):
            # One extra row tells whether another page exists
            rows = await self.course_repository.find_page(limit + 1, cursor)
            has_more = len(rows) > limit
            items = rows[:limit]
            next_cursor = items[-1].created_at if has_more and items else None
            logfire.info(
                "Courses listed", returned=len(items), has_more=has_more
            )
            return CoursePage(
                items=items, next_cursor=next_cursor, has_more=has_more, limit=limit
            )

    async def get_course(self, course_id: CourseId) -> Course:
        """Get a course by ID.

        Raises:
            NotFoundError: If course not found
        """
        with logfire.span("course_service.get_course", course_id=str(course_id)):
            course = await self.course_repository.find_by_id(course_id)
            if not course:
                logfire.warn("Course not found", course_id=str(course_id))
                raise NotFoundError("Course", str(course_id))
            return course

    async def create_course(self, course: Course) -> Course:
        with logfire.span(
            "course_service.create_course",
            course_id=str(course.id),
            slug=course.slug.root,
        ):
            saved = await self.course_repository.save(course)
            logfire.info("Course created", course_id=str(saved.id))
            return saved

    async def update_course(self, course_id: CourseId, course: Course) -> Course:
        """Replace a course and its gallery images.

        Raises:
            NotFoundError: Course does not exist
        """
        with logfire.span("course_service.update_course", course_id=str(course_id)):
            existing = await self.get_course(course_id)
            updated = course.model_copy(
                update={
                    "id": existing.id,
                    "created_at": existing.created_at,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.course_repository.save(updated)
            logfire.info("Course updated", course_id=str(course_id))
            return saved

    async def delete_course(self, course_id: CourseId) -> None:
        """Delete a course.

        Raises:
            NotFoundError: Course does not exist
        """
        with logfire.span("course_service.delete_course", course_id=str(course_id)):
            if not await self.course_repository.delete(course_id):
                logfire.warn("Course not found", course_id=str(course_id))
                raise NotFoundError("Course", str(course_id))
            logfire.info("Course deleted", course_id=str(course_id))
