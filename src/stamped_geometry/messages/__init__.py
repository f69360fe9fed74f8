"""Geometry message models (vectors, points, poses, wrenches, transforms)."""

from .header import Header
from .point_3d import Point3D
from .pose_3d import Pose3D, PoseWithCovariance
from .quaternion import Quaternion
from .stamped import (
    PointStamped,
    PoseStamped,
    PoseWithCovarianceStamped,
    QuaternionStamped,
    Vector3Stamped,
    WrenchStamped,
)
from .transform import Transform, TransformStamped
from .vector_3d import Vector3D
from .wrench import Wrench

__all__ = [
    "Header",
    "Point3D",
    "PointStamped",
    "Pose3D",
    "PoseStamped",
    "PoseWithCovariance",
    "PoseWithCovarianceStamped",
    "Quaternion",
    "QuaternionStamped",
    "Transform",
    "TransformStamped",
    "Vector3D",
    "Vector3Stamped",
    "Wrench",
    "WrenchStamped",
]
