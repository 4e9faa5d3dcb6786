from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Immutable base for wire-level value objects.

    Field names are emitted in camelCase when dumped with ``by_alias=True``,
    whatever the Python attribute is called.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
