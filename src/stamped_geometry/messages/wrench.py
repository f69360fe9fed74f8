from pydantic import BaseModel

from .vector_3d import Vector3D


class Wrench(BaseModel):
    force: Vector3D = Vector3D()
    torque: Vector3D = Vector3D()
