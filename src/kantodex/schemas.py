"""Request/response models shared by the API and the client."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TypeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str


class PokemonTypeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: TypeOut


class PokemonOut(BaseModel):
    """A Pokemon with nested ``types: [{"type": {"name": ...}}]``."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    number: int
    name: str
    image_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image_url", "imageUrl"),
        serialization_alias="imageUrl",
    )
    caught: bool = False
    seen: bool = False
    types: list[PokemonTypeOut] = Field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        return [link.type.name for link in self.types]


class PokemonUpdate(BaseModel):
    """PATCH body; omitted flags stay unchanged."""

    seen: bool | None = None
    caught: bool | None = None


class PokemonCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=50)
    image_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("image_url", "imageUrl"),
    )
    types: list[str] = Field(..., min_length=1, max_length=2)
    seen: bool = False
    caught: bool = False


class DexStatsOut(BaseModel):
    seen: int
    caught: int
    total: int


class ErrorResponse(BaseModel):
    detail: str
