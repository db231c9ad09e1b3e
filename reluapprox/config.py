"""Configuration dataclasses for the ReLU approximator."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class NetworkConfig:
    """Configuration controlling the network structure.

    Parameters
    ----------
    unit_count:
        Number of independent hidden units. Each unit owns one input weight
        and bias plus one output weight and bias, so the network holds
        ``2 * unit_count`` of each.
    seed:
        Optional random seed for parameter initialisation. Leaving it unset
        draws a fresh initialisation on every construction.
    distribution:
        Initial parameter distribution, ``"normal"`` (standard normal) or
        ``"uniform"`` (on ``[0, 1)``).
    """

    unit_count: int
    seed: int | None = None
    distribution: str = "normal"


@dataclass(slots=True)
class TrainingConfig:
    """Hyper-parameters for :meth:`ReluNetwork.train`.

    Parameters
    ----------
    epochs:
        Number of passes over the training samples.
    batch_size:
        Number of consecutive samples whose gradients are summed before a
        single parameter update. A value larger than the dataset yields one
        update per epoch.
    learning_rate:
        Step size applied to the summed gradients. Gradients are not averaged
        over the batch, so this value has to shrink as the batch grows.
    """

    epochs: int = 2000
    batch_size: int = 100
    learning_rate: float = 1e-6
