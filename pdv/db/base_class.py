from sqlalchemy import Column, Integer
from sqlalchemy.orm import as_declarative, declared_attr


@as_declarative()
class Base:
    """
    Base class which provides automated table name
    and surrogate primary key column.
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"  # Ex: Mesa -> mesas

    # Ids inteiros autoincrementáveis, como no contrato JSON ({id: int}).
    # Pode ser sobrescrito nos modelos específicos se necessário.
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
