from ..messages.header import Header
from ..messages.stamped import WrenchStamped
from ..messages.transform import Transform, TransformStamped
from ..messages.wrench import Wrench
from ..rigid_transform import RigidTransform, as_rigid_transform
from .base import TransformableAdapter
from .vector import transform_vector3


def transform_wrench(
    wrench: Wrench, transform: RigidTransform | TransformStamped | Transform
) -> Wrench:
    """Rotate force and torque independently, as two free vectors."""
    rigid = as_rigid_transform(transform)
    return Wrench(
        force=transform_vector3(wrench.force, rigid),
        torque=transform_vector3(wrench.torque, rigid),
    )


class WrenchAdapter(TransformableAdapter[WrenchStamped]):
    @property
    def msg_type(self) -> type[WrenchStamped]:
        return WrenchStamped

    def _apply(
        self, msg: WrenchStamped, transform: RigidTransform, header: Header
    ) -> WrenchStamped:
        return WrenchStamped(header=header, wrench=transform_wrench(msg.wrench, transform))
