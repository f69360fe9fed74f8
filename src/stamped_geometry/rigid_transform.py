"""Immutable rotation + translation built from transform messages."""

from dataclasses import dataclass
from typing import Self

import numpy as np

from .messages.transform import Transform, TransformStamped
from .rotation import quaternion_norm, quaternion_to_matrix


@dataclass(frozen=True, eq=False)
class RigidTransform:
    """
    Rigid motion ``p -> R p + t``.

    ``rotation`` is the source quaternion ``(x, y, z, w)``; ``matrix`` is the
    equivalent 3x3 array and ``translation`` a length-3 array. Both arrays
    are read-only.
    """

    rotation: tuple[float, float, float, float]
    matrix: np.ndarray
    translation: np.ndarray

    @classmethod
    def from_quaternion(
        cls, rotation: tuple[float, float, float, float], translation: tuple[float, float, float]
    ) -> Self:
        x, y, z, w = (float(c) for c in rotation)
        matrix = quaternion_to_matrix((x, y, z, w))
        matrix.setflags(write=False)
        offset = np.array(translation, dtype=np.float64)
        offset.setflags(write=False)
        return cls(rotation=(x, y, z, w), matrix=matrix, translation=offset)

    @classmethod
    def from_msg(cls, msg: TransformStamped | Transform) -> Self:
        """Build from a (stamped) transform message. The quaternion is not normalized."""
        t = msg.transform if isinstance(msg, TransformStamped) else msg
        q = t.rotation
        v = t.translation
        return cls.from_quaternion((q.x, q.y, q.z, q.w), (v.x, v.y, v.z))

    @classmethod
    def identity(cls) -> Self:
        return cls.from_quaternion((0.0, 0.0, 0.0, 1.0), (0.0, 0.0, 0.0))

    @property
    def rotation_norm(self) -> float:
        return quaternion_norm(self.rotation)

    def rotate(self, v: tuple[float, float, float] | np.ndarray) -> np.ndarray:
        """Rotate a free vector. Translation is not applied."""
        return self.matrix @ np.asarray(v, dtype=np.float64)

    def apply(self, p: tuple[float, float, float] | np.ndarray) -> np.ndarray:
        """Rotate then translate a position."""
        return self.rotate(p) + self.translation


def as_rigid_transform(transform: RigidTransform | TransformStamped | Transform) -> RigidTransform:
    if isinstance(transform, RigidTransform):
        return transform
    return RigidTransform.from_msg(transform)
