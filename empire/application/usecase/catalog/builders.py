"""Turn catalogue payloads into domain aggregates."""

from uuid import uuid4

from empire.application.usecase.parsing import build_model, parse_optional_uuid
from empire.domain.error import ValidationError
from empire.domain.model import Account, AccountVariant, Course, GalleryImage
from empire.domain.value import AccountId, CategoryId, CourseId

from .views import AccountInput, CourseInput, ImageInput


def _images(images: list[ImageInput]) -> list[GalleryImage]:
    # Missing order_index falls back to the position in the payload
    return [
        build_model(
            GalleryImage,
            {
                "id": uuid4(),
                "image_url": image.image_url,
                "locale": image.locale,
                "order_index": (
                    image.order_index if image.order_index is not None else index
                ),
            },
        )
        for index, image in enumerate(images)
    ]


def build_account(account_id: AccountId, payload: AccountInput) -> Account:
    """Account aggregate with fresh variant and image ids.

    Raises:
        ValidationError: Missing required fields or invalid values
    """
    if not payload.slug or not payload.name_en or not payload.name_vi:
        raise ValidationError("slug, name_en and name_vi are required")

    category_id = parse_optional_uuid(payload.category_id, "category_id")
    variants = [
        build_model(
            AccountVariant,
            {
                **variant.model_dump(exclude={"images"}),
                "id": uuid4(),
                "account_id": account_id,
                "images": _images(variant.images),
            },
        )
        for variant in payload.variants
    ]
    return build_model(
        Account,
        {
            **payload.model_dump(exclude={"variants", "gallery_images", "category_id"}),
            "id": account_id,
            "category_id": CategoryId(category_id) if category_id else None,
            "variants": variants,
            "images": _images(payload.gallery_images),
        },
    )


def build_course(course_id: CourseId, payload: CourseInput) -> Course:
    """Course aggregate with fresh image ids.

    Raises:
        ValidationError: Missing required fields or invalid values
    """
    if (
        not payload.slug
        or not payload.title_en
        or not payload.title_vi
        or not payload.instructor
    ):
        raise ValidationError("slug, title_en, title_vi and instructor are required")

    return build_model(
        Course,
        {
            **payload.model_dump(exclude={"gallery_images"}),
            "id": course_id,
            "images": _images(payload.gallery_images),
        },
    )


def new_account_id() -> AccountId:
    return AccountId(uuid4())


def new_course_id() -> CourseId:
    return CourseId(uuid4())
