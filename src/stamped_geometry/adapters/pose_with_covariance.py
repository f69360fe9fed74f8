from ..covariance import CovarianceMatrix, covariance_row_major_to_nested
from ..messages.stamped import PoseWithCovarianceStamped
from .base import StampedAdapter


class PoseWithCovarianceAdapter(StampedAdapter[PoseWithCovarianceStamped]):
    """
    Header access and covariance extraction for poses with covariance.

    There is no ``do_transform``: re-expressing the covariance in another
    frame is not supported.
    """

    @property
    def msg_type(self) -> type[PoseWithCovarianceStamped]:
        return PoseWithCovarianceStamped

    def get_covariance_matrix(self, msg: PoseWithCovarianceStamped) -> CovarianceMatrix:
        return covariance_row_major_to_nested(msg.pose.covariance)
