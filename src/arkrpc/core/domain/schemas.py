"""Schemas de las operaciones RPC (Pydantic v2).

Por qué Pydantic aquí:
- Un único modelo sirve como tipo estático y como validador en runtime,
  así ambos no pueden divergir.
- Los alias reproducen los nombres del wire (camelCase) mientras el código
  Python usa snake_case.

Convenciones (las usa `core.registry` para armar el catálogo):
- `<NOMBRE>_PATH`: path de la operación.
- `<Nombre>Request` / `<Nombre>Response`: shapes de entrada y salida.
- `<Nombre>DTO`: shape reutilizable, no es una operación.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic.config import ConfigDict

Number = Union[StrictInt, StrictFloat]
PositiveNumber = Union[Annotated[StrictInt, Field(gt=0)], Annotated[StrictFloat, Field(gt=0)]]


class RpcShape(BaseModel):
    """Base común de todos los shapes.

    - Los tipos `Strict*` evitan la coerción ("1" no es un número).
    - `frozen`: los shapes son inmutables una vez construidos.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, object]:
        """Payload JSON tal como viaja: alias camelCase, campos ausentes omitidos."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value: object) -> object:
        # Un campo opcional puede faltar, pero `null` no es un valor válido.
        if value is None:
            raise ValueError("null is not allowed; omit the field instead")
        return value


class DingDTO(RpcShape):
    id: Number = Field(
        ...,
        description="Identificador numérico del Ding.",
    )
    name: StrictStr = Field(
        ...,
        min_length=1,
        description="Nombre visible del Ding.",
    )


A_NAME_PATH = "/a_name"


class ANameRequest(RpcShape):
    msg: StrictStr = Field(..., min_length=1)


class ANameResponse(RpcShape):
    msg: StrictStr = Field(..., min_length=1)


EINS_PATH = "/eins"


class EinsRequest(RpcShape):
    required_string: StrictStr = Field(..., alias="requiredString", min_length=1)
    optional_string: StrictStr | None = Field(default=None, alias="optionalString")
    required_int: PositiveNumber = Field(..., alias="requiredInt")
    optional_int: Number | None = Field(default=None, alias="optionalInt")
    required_bool: StrictBool = Field(..., alias="requiredBool")
    optional_bool: StrictBool | None = Field(default=None, alias="optionalBool")


class EinsResponse(RpcShape):
    response_string: StrictStr = Field(..., alias="responseString", min_length=1)


LISTEN_PATH = "/listen"


class ListenRequest(RpcShape):
    pass


class ListenResponse(RpcShape):
    dinge: list[DingDTO] = Field(
        ...,
        description="Cero o más Dinge.",
    )


ZWEI_PATH = "/zwei"


class ZweiRequest(RpcShape):
    optional_string: StrictStr | None = Field(default=None, alias="optionalString")


class ZweiResponse(RpcShape):
    response_string: StrictStr = Field(..., alias="responseString", min_length=1)
