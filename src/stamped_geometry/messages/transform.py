from pydantic import BaseModel, Field

from .header import Header
from .quaternion import Quaternion
from .vector_3d import Vector3D


class Transform(BaseModel):
    translation: Vector3D = Vector3D()
    rotation: Quaternion = Quaternion()


class TransformStamped(BaseModel):
    """Transform from ``child_frame_id`` into ``header.frame_id``, valid at ``header.stamp``."""

    header: Header = Field(default_factory=Header)
    child_frame_id: str = ""
    transform: Transform = Transform()
