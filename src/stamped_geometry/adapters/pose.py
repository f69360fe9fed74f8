from ..messages.header import Header
from ..messages.pose_3d import Pose3D
from ..messages.stamped import PoseStamped
from ..messages.transform import Transform, TransformStamped
from ..rigid_transform import RigidTransform, as_rigid_transform
from .base import TransformableAdapter
from .point import transform_point
from .quaternion import transform_quaternion


def transform_pose(
    pose: Pose3D, transform: RigidTransform | TransformStamped | Transform
) -> Pose3D:
    """
    Re-express a pose in the transform's parent frame.

    The position follows the point rule (rotate, then translate) and the
    orientation becomes ``R * q`` with the transform's rotation on the left.
    """
    rigid = as_rigid_transform(transform)
    return Pose3D(
        position=transform_point(pose.position, rigid),
        orientation=transform_quaternion(pose.orientation, rigid),
    )


class PoseAdapter(TransformableAdapter[PoseStamped]):
    @property
    def msg_type(self) -> type[PoseStamped]:
        return PoseStamped

    def _apply(self, msg: PoseStamped, transform: RigidTransform, header: Header) -> PoseStamped:
        return PoseStamped(header=header, pose=transform_pose(msg.pose, transform))
