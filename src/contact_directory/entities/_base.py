from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base entity class with a caller-supplied, write-once identifier.

    Assignment is validated, so field rules hold after every mutation and not
    only at construction.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    # An omitted id reaches the subclass validator as None.
    id: str = Field(
        default=None,
        validate_default=True,
        frozen=True,
        description="Unique identifier for the entity",
    )
