# learnhub/schemas/common.py
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# emails are stored and compared lowercased
Email = Annotated[EmailStr, AfterValidator(str.lower)]


class CamelModel(BaseModel):
    """JSON keys are camelCase, attributes stay snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertResult(CamelModel):
    inserted_id: int


class UpdateResult(CamelModel):
    matched_count: int
    modified_count: int


class DeleteResult(CamelModel):
    deleted_count: int
