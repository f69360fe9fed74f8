from pydantic import BaseModel, Field, field_validator

from ..constants import COVARIANCE_SIZE
from .point_3d import Point3D
from .quaternion import Quaternion


class Pose3D(BaseModel):
    position: Point3D = Point3D()
    orientation: Quaternion = Quaternion()  # unit quaternion (x, y, z, w)


class PoseWithCovariance(BaseModel):
    pose: Pose3D = Pose3D()
    # Row-major 6x6 over (x, y, z, roll, pitch, yaw)
    covariance: tuple[float, ...] = Field(default=(0.0,) * COVARIANCE_SIZE)

    @field_validator("covariance")
    @classmethod
    def validate_covariance(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if len(v) != COVARIANCE_SIZE:
            raise ValueError(f"Need {COVARIANCE_SIZE} covariance entries, received {len(v)}")
        return v
