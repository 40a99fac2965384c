"""Create, read, update and delete course use cases."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.service import CourseService
from empire.domain.value import CourseId

from .builders import build_course, new_course_id
from .views import CourseInput, CourseItem


class CreateCourseRequest(BaseModel):
    course: CourseInput


class UpdateCourseRequest(BaseModel):
    course_id: str
    course: CourseInput


class CourseIdRequest(BaseModel):
    course_id: str


class CourseResponse(BaseModel):
    course: CourseItem


class GetCourseUseCase:
    def __init__(self, course_service: CourseService) -> None:
        self.course_service = course_service

    async def execute(self, request: CourseIdRequest) -> CourseResponse:
        course_id = CourseId(parse_uuid(request.course_id, "course id"))
        course = await self.course_service.get_course(course_id)
        return CourseResponse(course=CourseItem.from_domain(course))


class CreateCourseUseCase:
    """Use case for creating a course with its gallery images."""

    def __init__(self, course_service: CourseService) -> None:
        self.course_service = course_service

    async def execute(self, request: CreateCourseRequest) -> CourseResponse:
        """Execute create course flow.

        Raises:
            ValidationError: Missing slug, titles or instructor
        """
        course = build_course(new_course_id(), request.course)
        saved = await self.course_service.create_course(course)
        return CourseResponse(course=CourseItem.from_domain(saved))


class UpdateCourseUseCase:
    """Use case for replacing a course and its gallery images."""

    def __init__(self, course_service: CourseService) -> None:
        self.course_service = course_service

    async def execute(self, request: UpdateCourseRequest) -> CourseResponse:
        course_id = CourseId(parse_uuid(request.course_id, "course id"))
        course = build_course(course_id, request.course)
        saved = await self.course_service.update_course(course_id, course)
        return CourseResponse(course=CourseItem.from_domain(saved))


class DeleteCourseUseCase:
    def __init__(self, course_service: CourseService) -> None:
        self.course_service = course_service

    async def execute(self, request: CourseIdRequest) -> None:
        course_id = CourseId(parse_uuid(request.course_id, "course id"))
        await self.course_service.delete_course(course_id)
