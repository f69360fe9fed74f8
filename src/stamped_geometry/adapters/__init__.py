"""Per-type adapters for stamped geometry messages."""

from typing import Any

from pydantic import BaseModel

from .base import StampedAdapter, TransformableAdapter, assign
from .point import PointAdapter, transform_point
from .pose import PoseAdapter, transform_pose
from .pose_with_covariance import PoseWithCovarianceAdapter
from .quaternion import QuaternionAdapter, transform_quaternion
from .vector import VectorAdapter, transform_vector3
from .wrench import WrenchAdapter, transform_wrench

ADAPTERS: dict[type[BaseModel], StampedAdapter[Any]] = {
    adapter.msg_type: adapter
    for adapter in (
        VectorAdapter(),
        PointAdapter(),
        QuaternionAdapter(),
        PoseAdapter(),
        PoseWithCovarianceAdapter(),
        WrenchAdapter(),
    )
}


def get_adapter(msg: BaseModel | type[BaseModel]) -> StampedAdapter[Any]:
    """
    Look up the adapter for a stamped message or message type.

    Subclasses of a registered message type use the nearest registered base.

    Raises:
        TypeError: If no adapter is registered for the type.
    """
    msg_type = msg if isinstance(msg, type) else type(msg)
    for base in msg_type.__mro__:
        if base in ADAPTERS:
            return ADAPTERS[base]
    raise TypeError(f"No adapter registered for {msg_type.__name__}")


__all__ = [
    "ADAPTERS",
    "PointAdapter",
    "PoseAdapter",
    "PoseWithCovarianceAdapter",
    "QuaternionAdapter",
    "StampedAdapter",
    "TransformableAdapter",
    "VectorAdapter",
    "WrenchAdapter",
    "assign",
    "get_adapter",
    "transform_point",
    "transform_pose",
    "transform_quaternion",
    "transform_vector3",
    "transform_wrench",
]
