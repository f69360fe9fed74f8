"""Apply rigid transforms to timestamped, frame-tagged geometry messages."""

from .config import TransformConfig
from .convert import (
    do_transform,
    from_msg,
    get_covariance_matrix,
    get_frame_id,
    get_timestamp,
    to_msg,
)
from .rigid_transform import RigidTransform

__all__ = [
    "RigidTransform",
    "TransformConfig",
    "do_transform",
    "from_msg",
    "get_covariance_matrix",
    "get_frame_id",
    "get_timestamp",
    "to_msg",
]
