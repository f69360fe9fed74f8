"""Generic entry points over all stamped geometry messages.

These functions resolve the adapter for the message's type and delegate to
it, so callers can treat every stamped type uniformly.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel

from .adapters import PoseWithCovarianceAdapter, TransformableAdapter, assign, get_adapter
from .config import TransformConfig
from .covariance import CovarianceMatrix
from .messages.transform import TransformStamped
from .rigid_transform import RigidTransform

logger = logging.getLogger(__name__)

MsgT = TypeVar("MsgT", bound=BaseModel)


def get_timestamp(msg: BaseModel) -> int:
    """Return the message stamp in nanoseconds since epoch."""
    return get_adapter(msg).get_timestamp(msg)


def get_frame_id(msg: BaseModel) -> str:
    return get_adapter(msg).get_frame_id(msg)


def get_covariance_matrix(msg: BaseModel) -> CovarianceMatrix:
    """
    Return the covariance of a covariance-bearing message as a nested 6x6 matrix.

    Raises:
        TypeError: If the message type carries no covariance.
    """
    adapter = get_adapter(msg)
    if not isinstance(adapter, PoseWithCovarianceAdapter):
        raise TypeError(f"{type(msg).__name__} has no covariance")
    return adapter.get_covariance_matrix(msg)


def do_transform(
    msg: MsgT,
    transform: TransformStamped,
    out: MsgT | None = None,
    config: TransformConfig | None = None,
) -> MsgT:
    """
    Re-express a stamped message in the transform's destination frame.

    Args:
        msg: Stamped message to transform. Never modified unless it is also ``out``.
        transform: Transform from ``msg``'s frame into ``transform.header.frame_id``.
        out: Optional message to write the result into. May be ``msg`` itself.
        config: Optional diagnostics settings.

    Returns:
        The transformed message (``out`` when given). Its header is the
        transform's frame id and stamp.

    Raises:
        TypeError: If the message type has no adapter or cannot be transformed, or
            if ``out`` is a different message type (``out`` is then left untouched).
    """
    adapter = get_adapter(msg)
    if not isinstance(adapter, TransformableAdapter):
        raise TypeError(f"{type(msg).__name__} does not support do_transform")

    rigid = RigidTransform.from_msg(transform)
    if config is not None and config.check_rotation_norm:
        norm = rigid.rotation_norm
        if not abs(norm - 1.0) <= config.rotation_norm_tolerance:
            logger.warning(
                f"Transform {transform.child_frame_id!r} -> {transform.header.frame_id!r} "
                f"has non-unit rotation (norm={norm})"
            )

    logger.debug(
        f"Transforming {type(msg).__name__} from {adapter.get_frame_id(msg)!r} "
        f"to {transform.header.frame_id!r}"
    )
    result = adapter.do_transform(msg, transform, rigid)

    if out is None:
        return result
    return assign(out, result)


def to_msg(msg: MsgT) -> MsgT:
    """Identity conversion to the generic message form."""
    return get_adapter(msg).to_msg(msg)


def from_msg(msg: MsgT, out: MsgT | None = None) -> MsgT:
    """Identity conversion from the generic message form, optionally into ``out``."""
    return get_adapter(msg).from_msg(msg, out)
