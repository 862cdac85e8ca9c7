from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobly.core.validation import check_email, check_url


class InputModel(BaseModel):
    """Request payloads: camelCase keys only, unknown keys rejected, no type coercion."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class OutputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


Url = Annotated[str, AfterValidator(check_url)]
Email = Annotated[str, Field(min_length=6, max_length=60), AfterValidator(check_email)]
