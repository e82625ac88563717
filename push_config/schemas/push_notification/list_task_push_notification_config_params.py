"""Schema for listing the push notification configs of a task."""

from pydantic import Field

from push_config.schemas.base_schema_model import BaseSchemaModel


class ListTaskPushNotificationConfigParams(BaseSchemaModel):
    """Parameters for one page of a task's push notification configs.

    ``page_token`` is the ``next_page_token`` of the previous page; an empty
    token requests the first page.
    """

    id: str = Field(..., min_length=1, description="Task identifier")
    page_size: int = Field(
        default=0, description="Requested page size; <= 0 means the maximum"
    )
    page_token: str | None = Field(
        default="", description="Opaque cursor returned by the previous page"
    )
    tenant: str = Field(default="", description="Tenant identifier")

    def get_effective_page_size(self, max_page_size: int) -> int:
        """Return the page size to use, capped to ``max_page_size``.

        A requested size that is not positive or exceeds the maximum
        resolves to the maximum.
        """
        if self.page_size <= 0 or self.page_size > max_page_size:
            return max_page_size
        return self.page_size
