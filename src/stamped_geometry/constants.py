"""Shared constants for covariance-bearing message models."""

from enum import StrEnum

COVARIANCE_DIM = 6
COVARIANCE_SIZE = COVARIANCE_DIM * COVARIANCE_DIM


class CovarianceAxis(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"
    ROLL = "roll"
    PITCH = "pitch"
    YAW = "yaw"
