"""Catalogue use cases: categories, account listings and courses."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .get_account import GetAccountRequest, GetAccountResponse, GetAccountUseCase
from .list_accounts import ListAccountsRequest, ListAccountsResponse, ListAccountsUseCase
from .list_categories import ListCategoriesResponse, ListCategoriesUseCase
from .list_courses import ListCoursesRequest, ListCoursesResponse, ListCoursesUseCase
from .save_account import (
    CreateAccountRequest,
    CreateAccountUseCase,
    SaveAccountResponse,
    UpdateAccountRequest,
    UpdateAccountUseCase,
)
from .manage_course import (
    CourseIdRequest,
    CourseResponse,
    CreateCourseRequest,
    CreateCourseUseCase,
    DeleteCourseUseCase,
    GetCourseUseCase,
    UpdateCourseRequest,
    UpdateCourseUseCase,
)
from .views import (
    AccountInput,
    AccountItem,
    CategoryItem,
    CourseInput,
    CourseItem,
    ImageInput,
    VariantInput,
)

__all__ = [
    "AccountInput",
    "AccountItem",
    "CategoryItem",
    "CourseIdRequest",
    "CourseInput",
    "CourseItem",
    "CourseResponse",
    "CreateAccountRequest",
    "CreateAccountUseCase",
    "CreateCourseRequest",
    "CreateCourseUseCase",
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "DeleteCourseUseCase",
    "GetAccountRequest",
    "GetAccountResponse",
    "GetAccountUseCase",
    "GetCourseUseCase",
    "ImageInput",
    "ListAccountsRequest",
    "ListAccountsResponse",
    "ListAccountsUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "ListCoursesRequest",
    "ListCoursesResponse",
    "ListCoursesUseCase",
    "SaveAccountResponse",
    "UpdateAccountRequest",
    "UpdateAccountUseCase",
    "UpdateCourseRequest",
    "UpdateCourseUseCase",
    "VariantInput",
]
