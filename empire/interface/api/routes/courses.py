"""Course routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status

from empire.application.usecase.catalog import (
    CourseIdRequest,
    CourseInput,
    CourseResponse,
    CreateCourseRequest,
    CreateCourseUseCase,
    DeleteCourseUseCase,
    GetCourseUseCase,
    ListCoursesRequest,
    ListCoursesResponse,
    ListCoursesUseCase,
    UpdateCourseRequest,
    UpdateCourseUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_admin, session_token
from empire.interface.api.routes.common import SuccessResponse

router = APIRouter(prefix="/courses", tags=["catalog"], route_class=DishkaRoute)


@router.get("", response_model=ListCoursesResponse)
async def list_courses(
    list_courses_use_case: FromDishka[ListCoursesUseCase],
    limit: str | None = None,
    cursor: str | None = None,
    currency: str | None = None,
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    sort: str | None = None,
) -> ListCoursesResponse:
    """Public course listing, newest first, with cursor pagination.

    Args:
        limit: Page size (default 20, max 50)
        cursor: ``nextCursor`` of the previous page
    """
    return await list_courses_use_case.execute(
        ListCoursesRequest(
            limit=limit,
            cursor=cursor,
            currency=currency,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
        )
    )


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: str,
    get_course_use_case: FromDishka[GetCourseUseCase],
) -> CourseResponse:
    return await get_course_use_case.execute(CourseIdRequest(course_id=course_id))


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_course(
    request: CourseInput,
    create_course_use_case: FromDishka[CreateCourseUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> CourseResponse:
    """Create a course with its gallery images. Admin only."""
    await require_admin(access_policy, token)
    return await create_course_use_case.execute(CreateCourseRequest(course=request))


@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: str,
    request: CourseInput,
    update_course_use_case: FromDishka[UpdateCourseUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> CourseResponse:
    """Replace a course and its gallery images. Admin only."""
    await require_admin(access_policy, token)
    return await update_course_use_case.execute(
        UpdateCourseRequest(course_id=course_id, course=request)
    )


@router.delete("/{course_id}", response_model=SuccessResponse)
async def delete_course(
    course_id: str,
    delete_course_use_case: FromDishka[DeleteCourseUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SuccessResponse:
    """Delete a course. Admin only."""
    await require_admin(access_policy, token)
    await delete_course_use_case.execute(CourseIdRequest(course_id=course_id))
    return SuccessResponse(success=True)
