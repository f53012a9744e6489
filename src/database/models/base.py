from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Shared config for stored documents and the models built from them.

    Attributes are snake_case in Python; stored documents and serialized
    responses use camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
        revalidate_instances="always",
    )
