# pdv/schemas/mesa.py
from pydantic import BaseModel, Field

from pdv.db.models.mesa import StatusMesa


class MesaCreateSchemas(BaseModel):
    numero: int = Field(..., alias="number", gt=0)
    status: StatusMesa = StatusMesa.LIVRE

    class Config:
        populate_by_name = True
        extra = "forbid"


class MesaStatusUpdateSchemas(BaseModel):
    status: StatusMesa

    class Config:
        extra = "forbid"


class MesaSchemas(BaseModel):
    id: int
    numero: int = Field(..., alias="number")
    status: StatusMesa

    class Config:
        from_attributes = True
        populate_by_name = True
