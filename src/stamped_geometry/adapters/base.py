"""Abstract base classes shared by the per-type adapters."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from ..messages.header import Header
from ..messages.transform import TransformStamped
from ..rigid_transform import RigidTransform

MsgT = TypeVar("MsgT", bound=BaseModel)


def assign(out: MsgT, value: MsgT) -> MsgT:
    """
    Overwrite every field of ``out`` with a deep copy of ``value``'s fields.

    Raises:
        TypeError: If ``out`` and ``value`` are different message types. ``out``
            is left untouched.
    """
    if type(out) is not type(value):
        raise TypeError(f"Cannot assign {type(value).__name__} into {type(out).__name__}")

    # Copy first so that ``out is value`` and shared sub-models are both safe.
    snapshot = value.model_copy(deep=True)
    for name in type(snapshot).model_fields:
        setattr(out, name, getattr(snapshot, name))
    return out


class StampedAdapter(ABC, Generic[MsgT]):
    """
    Read access to a stamped message's header plus the identity conversions.

    Every stamped message type has exactly one adapter.
    """

    @property
    @abstractmethod
    def msg_type(self) -> type[MsgT]:
        """Return the stamped message type this adapter handles."""
        pass

    def get_timestamp(self, msg: MsgT) -> int:
        return msg.header.stamp  # type: ignore[attr-defined]

    def get_frame_id(self, msg: MsgT) -> str:
        return msg.header.frame_id  # type: ignore[attr-defined]

    def to_msg(self, msg: MsgT) -> MsgT:
        return msg

    def from_msg(self, msg: MsgT, out: MsgT | None = None) -> MsgT:
        if out is None:
            return msg
        return assign(out, msg)


class TransformableAdapter(StampedAdapter[MsgT]):
    """Adapter for message types that can be re-expressed in another frame."""

    @abstractmethod
    def _apply(self, msg: MsgT, transform: RigidTransform, header: Header) -> MsgT:
        """
        Build the transformed message.

        Args:
            msg: Input message. Must not be modified.
            transform: Rigid motion to apply to the payload.
            header: Header for the result (the transform's frame and stamp).

        Returns:
            A new message of the same type.
        """
        pass

    def do_transform(
        self, msg: MsgT, transform: TransformStamped, rigid: RigidTransform | None = None
    ) -> MsgT:
        """
        Re-express ``msg`` in ``transform.header.frame_id``.

        The result carries the transform's frame id and stamp, whatever the
        input's header said.

        Args:
            msg: Message to transform.
            transform: Source of the result's header, and of the rigid motion
                unless ``rigid`` is given.
            rigid: Already-built rigid motion for ``transform``.
        """
        if rigid is None:
            rigid = RigidTransform.from_msg(transform)
        header = Header(stamp=transform.header.stamp, frame_id=transform.header.frame_id)
        return self._apply(msg, rigid, header)
