"""Frame-tagged, timestamped wrappers around the geometry payloads."""

from pydantic import BaseModel, Field

from .header import Header
from .point_3d import Point3D
from .pose_3d import Pose3D, PoseWithCovariance
from .quaternion import Quaternion
from .vector_3d import Vector3D
from .wrench import Wrench


class Vector3Stamped(BaseModel):
    header: Header = Field(default_factory=Header)
    vector: Vector3D = Vector3D()


class PointStamped(BaseModel):
    header: Header = Field(default_factory=Header)
    point: Point3D = Point3D()


class QuaternionStamped(BaseModel):
    header: Header = Field(default_factory=Header)
    quaternion: Quaternion = Quaternion()


class PoseStamped(BaseModel):
    header: Header = Field(default_factory=Header)
    pose: Pose3D = Pose3D()


class PoseWithCovarianceStamped(BaseModel):
    header: Header = Field(default_factory=Header)
    pose: PoseWithCovariance = PoseWithCovariance()


class WrenchStamped(BaseModel):
    header: Header = Field(default_factory=Header)
    wrench: Wrench = Wrench()
