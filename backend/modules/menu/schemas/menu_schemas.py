from typing import List
from pydantic import ConfigDict, Field

from core.response_models import CamelModel


class MenuItem(CamelModel):
    """A purchasable item on the counter menu"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    price: float = Field(..., ge=0)


class MenuResponse(CamelModel):
    menu: List[MenuItem]
    tax_rate: float
