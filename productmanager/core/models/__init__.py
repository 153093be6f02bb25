from .base import (  # noqa: F401
    CoreBaseModel,
    TimestampedModel,
    UUIDPrimaryKeyModel,
)
