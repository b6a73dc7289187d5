from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# table -> column a subscriber may filter on; the value must be its own id
SUBSCRIBABLE = {
    "notifications": "user_id",
    "chat_messages": "receiver_id",
}

class RealtimeFilter(BaseModel):
    """Subscription filter requested over the socket query string"""
    table: Literal["notifications", "chat_messages"]
    column: str
    value: str = Field(min_length=1)

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="after")
    def check_column(self):
        if SUBSCRIBABLE[self.table] != self.column:
            raise ValueError(f"{self.table} can only be filtered by {SUBSCRIBABLE[self.table]}")
        return self
