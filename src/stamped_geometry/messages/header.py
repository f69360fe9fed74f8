import time

from pydantic import BaseModel, Field


class Header(BaseModel):
    stamp: int = Field(default_factory=time.time_ns)  # nanoseconds since epoch
    frame_id: str = ""
