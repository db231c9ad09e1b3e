"""Scalar function approximation with additive leaky-ReLU units."""

from .config import NetworkConfig, TrainingConfig
from .data import comparison_table, cubic, sample_function, training_samples, validation_samples
from .network import InvalidAddressError, ReluNetwork, TrainingHistory, leaky_relu, relu_ish

__all__ = [
    "NetworkConfig",
    "TrainingConfig",
    "InvalidAddressError",
    "ReluNetwork",
    "TrainingHistory",
    "leaky_relu",
    "relu_ish",
    "comparison_table",
    "cubic",
    "sample_function",
    "training_samples",
    "validation_samples",
]
