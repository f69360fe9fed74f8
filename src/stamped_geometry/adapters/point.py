from ..messages.header import Header
from ..messages.point_3d import Point3D
from ..messages.stamped import PointStamped
from ..messages.transform import Transform, TransformStamped
from ..rigid_transform import RigidTransform, as_rigid_transform
from .base import TransformableAdapter


def transform_point(
    point: Point3D, transform: RigidTransform | TransformStamped | Transform
) -> Point3D:
    """Apply the full rigid motion: rotate, then translate."""
    x, y, z = as_rigid_transform(transform).apply((point.x, point.y, point.z))
    return Point3D(x=float(x), y=float(y), z=float(z))


class PointAdapter(TransformableAdapter[PointStamped]):
    @property
    def msg_type(self) -> type[PointStamped]:
        return PointStamped

    def _apply(self, msg: PointStamped, transform: RigidTransform, header: Header) -> PointStamped:
        return PointStamped(header=header, point=transform_point(msg.point, transform))
