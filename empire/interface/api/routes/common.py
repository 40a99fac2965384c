"""Response models shared across routers."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool
