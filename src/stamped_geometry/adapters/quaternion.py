from ..messages.header import Header
from ..messages.quaternion import Quaternion
from ..messages.stamped import QuaternionStamped
from ..messages.transform import Transform, TransformStamped
from ..rigid_transform import RigidTransform, as_rigid_transform
from ..rotation import quaternion_multiply
from .base import TransformableAdapter


def transform_quaternion(
    orientation: Quaternion, transform: RigidTransform | TransformStamped | Transform
) -> Quaternion:
    """Pre-multiply ``orientation`` by the transform's rotation. Not renormalized."""
    rotation = as_rigid_transform(transform).rotation
    x, y, z, w = quaternion_multiply(
        rotation, (orientation.x, orientation.y, orientation.z, orientation.w)
    )
    return Quaternion(x=x, y=y, z=z, w=w)


class QuaternionAdapter(TransformableAdapter[QuaternionStamped]):
    @property
    def msg_type(self) -> type[QuaternionStamped]:
        return QuaternionStamped

    def _apply(
        self, msg: QuaternionStamped, transform: RigidTransform, header: Header
    ) -> QuaternionStamped:
        return QuaternionStamped(
            header=header, quaternion=transform_quaternion(msg.quaternion, transform)
        )
