from ..messages.header import Header
from ..messages.stamped import Vector3Stamped
from ..messages.transform import Transform, TransformStamped
from ..messages.vector_3d import Vector3D
from ..rigid_transform import RigidTransform, as_rigid_transform
from .base import TransformableAdapter


def transform_vector3(
    vector: Vector3D, transform: RigidTransform | TransformStamped | Transform
) -> Vector3D:
    """Rotate a free vector. Translation is ignored."""
    x, y, z = as_rigid_transform(transform).rotate((vector.x, vector.y, vector.z))
    return Vector3D(x=float(x), y=float(y), z=float(z))


class VectorAdapter(TransformableAdapter[Vector3Stamped]):
    @property
    def msg_type(self) -> type[Vector3Stamped]:
        return Vector3Stamped

    def _apply(
        self, msg: Vector3Stamped, transform: RigidTransform, header: Header
    ) -> Vector3Stamped:
        return Vector3Stamped(header=header, vector=transform_vector3(msg.vector, transform))
