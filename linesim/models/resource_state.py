# linesim/models/resource_state.py

from pydantic import BaseModel
from typing import Optional


class ResourceState(BaseModel):
    """Line state that survives from one event to the next."""

    current_setup: Optional[int] = None  # None until the first setup change
    maintenance_scheduled: bool = False

    def is_tooled_for(self, product_type: int) -> bool:
        return self.current_setup == product_type
