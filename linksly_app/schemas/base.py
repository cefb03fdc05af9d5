from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from linksly_app.utils import as_utc

# Datetimes always leave the API timezone-aware, in UTC
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire.

    - from_attributes=True reads straight from SQLAlchemy model instances
    - populate_by_name=True accepts field names as well as aliases
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
