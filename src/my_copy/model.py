# SPDX-License-Identifier: Apache-2.0

"""Custom Base Model for pydantic classes."""

import pydantic

from my_copy.constants import BUFFER_SIZE, CREATION_MODE


class CustomBaseModel(pydantic.BaseModel):
    """Custom Model Config."""

    model_config = pydantic.ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
    )

    def to_dict(self) -> dict:
        """Convert the object into a dict."""
        return self.model_dump()


class CopySettings(CustomBaseModel):
    """Parameters of a single copy."""

    buffer_size: pydantic.PositiveInt = BUFFER_SIZE
    creation_mode: int = pydantic.Field(default=CREATION_MODE, ge=0, le=0o7777)
