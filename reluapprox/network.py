"""Additive leaky-ReLU network trained with a hand-derived backward pass.

The network is a sum of ``unit_count`` independent sub-networks. Unit ``i``
maps the scalar input through one leaky-ReLU neuron (layer 0) and feeds the
result into a second leaky-ReLU neuron (layer 1) that belongs to it alone.
The contributions of all units are summed and passed through a final
leaky-ReLU::

    h_i = relu(w0_i * x + b0_i)
    c_i = relu(w1_i * h_i + b1_i)
    y   = relu(sum(c_i))

There is no hidden-to-output matrix; each hidden unit owns exactly one output
slot. Parameters are stored in two flat lists, ``weights`` and ``biases``,
each of length ``2 * unit_count``. Layer 0 occupies offsets ``[0, N)`` and
layer 1 occupies ``[N, 2N)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
import numbers
import random
import sys
from typing import Iterable, List, Sequence, Tuple

from tqdm.auto import tqdm

from .config import NetworkConfig, TrainingConfig

Sample = Tuple[float, float]
Vector = List[float]

LEAKY_SLOPE = 0.01
INIT_DISTRIBUTIONS = ("normal", "uniform")


class InvalidAddressError(LookupError):
    """Raised when a parameter coordinate does not name a layer-0 or layer-1 slot."""


def relu_ish(value: float, reference: float) -> float:
    """Scale ``value`` by the leaky-ReLU slope taken at ``reference``.

    With ``value == reference`` this is the activation itself. The backward
    pass uses it with a different ``reference`` to gate a gradient term by the
    sign of another quantity.
    """

    if reference >= 0.0:
        return value
    return LEAKY_SLOPE * value


def leaky_relu(value: float) -> float:
    return relu_ish(value, value)


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _require_int(name: str, value: object) -> int:
    if not _is_integer(value):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


@dataclass
class TrainingHistory:
    """Container storing the periodic reports collected during :meth:`ReluNetwork.train`."""

    epochs: list[int] = field(default_factory=list)
    costs: list[float] = field(default_factory=list)
    updates: int = 0

    def record(self, epoch: int, cost: float) -> None:
        self.epochs.append(epoch)
        self.costs.append(cost)


class ReluNetwork:
    """Scalar function approximator built from independent leaky-ReLU units.

    Parameters
    ----------
    unit_count:
        Number of hidden units. Must be a positive integer.
    rng:
        Random source used for the initial parameters. Weights are drawn
        first, then biases. A fresh unseeded :class:`random.Random` is used when
        omitted.
    distribution:
        ``"normal"`` draws from a standard normal; ``"uniform"`` draws from
        ``[0, 1)``.
    """

    def __init__(
        self,
        unit_count: int,
        *,
        rng: random.Random | None = None,
        distribution: str = "normal",
    ):
        unit_count = _require_int("unit_count", unit_count)
        if unit_count <= 0:
            raise ValueError("unit_count must be positive")
        self.unit_count = unit_count
        if distribution not in INIT_DISTRIBUTIONS:
            raise ValueError(f"distribution must be one of {INIT_DISTRIBUTIONS}, got {distribution!r}")
        self.rng = rng if rng is not None else random.Random()
        draw = self.rng.random if distribution == "uniform" else lambda: self.rng.gauss(0.0, 1.0)
        size = 2 * unit_count
        self.weights: Vector = [draw() for _ in range(size)]
        self.biases: Vector = [draw() for _ in range(size)]

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "ReluNetwork":
        return cls(
            config.unit_count,
            rng=random.Random(config.seed),
            distribution=config.distribution,
        )

    @classmethod
    def from_parameters(cls, weights: Sequence[float], biases: Sequence[float]) -> "ReluNetwork":
        """Build a network around explicit parameter lists.

        Both lists must have the same, even, non-zero length; layer-0 values
        come first, followed by the layer-1 values of the same units.
        """

        if len(weights) != len(biases):
            raise ValueError("weights and biases must have the same length")
        if not weights or len(weights) % 2:
            raise ValueError("parameter lists must hold 2 * unit_count values")
        network = cls.__new__(cls)
        network.unit_count = len(weights) // 2
        network.rng = random.Random()
        network.weights = [float(value) for value in weights]
        network.biases = [float(value) for value in biases]
        return network

    # ------------------------------------------------------------------
    # Parameter addressing
    # ------------------------------------------------------------------
    def locate(self, layer: int, source: int, target: int) -> int:
        """Return the flat offset for the connection ``source -> target`` of ``layer``.

        Layer 0 connects the single input (``target == 0``) to hidden unit
        ``source``. Layer 1 connects hidden unit ``target`` to the single
        output (``source == 0``). Any other coordinate is rejected.
        """

        coordinates = (layer, source, target)
        if not all(_is_integer(c) for c in coordinates):
            raise InvalidAddressError(f"Invalid location: {layer}, {source}, {target}")
        layer, source, target = (int(c) for c in coordinates)
        if layer == 0 and target == 0 and 0 <= source < self.unit_count:
            return source
        if layer == 1 and source == 0 and 0 <= target < self.unit_count:
            return self.unit_count + target
        raise InvalidAddressError(f"Invalid location: {layer}, {source}, {target}")

    def address(self, layer: int, unit: int) -> int:
        """Return the offset of ``unit``'s parameters in ``layer``."""

        if layer == 0:
            return self.locate(0, unit, 0)
        if layer == 1:
            return self.locate(1, 0, unit)
        raise InvalidAddressError(f"Invalid layer: {layer}")

    def weight(self, layer: int, unit: int) -> float:
        return self.weights[self.address(layer, unit)]

    def bias(self, layer: int, unit: int) -> float:
        return self.biases[self.address(layer, unit)]

    def pre_activation(self, value: float, layer: int, unit: int) -> float:
        offset = self.address(layer, unit)
        return self.weights[offset] * value + self.biases[offset]

    def activation(self, value: float, layer: int, unit: int) -> float:
        return leaky_relu(self.pre_activation(value, layer, unit))

    # ------------------------------------------------------------------
    # Forward pass and cost
    # ------------------------------------------------------------------
    def evaluate(self, x: float) -> float:
        total = 0.0
        for unit in range(self.unit_count):
            hidden = self.activation(x, 0, unit)
            total += self.activation(hidden, 1, unit)
        return leaky_relu(total)

    __call__ = evaluate

    def predict(self, xs: Iterable[float]) -> list[float]:
        return [self.evaluate(x) for x in xs]

    def cost(self, samples: Iterable[Sample]) -> float:
        """Summed squared error over ``samples`` divided by ``unit_count``."""

        loss = 0.0
        for x, y in samples:
            loss += (y - self.evaluate(x)) ** 2
        return loss / self.unit_count

    # ------------------------------------------------------------------
    # Backward pass
    # ------------------------------------------------------------------
    def accumulate_gradients(self, batch: Sequence[Sample], learning_rate: float) -> None:
        """Sum the gradients of ``batch`` and apply one descent step."""

        self._check_learning_rate(learning_rate)
        self._descend(batch, learning_rate)

    def _descend(self, batch: Sequence[Sample], learning_rate: float) -> None:
        if not batch:
            return
        # Parameters stay frozen until the update below, so one forward pass
        # per sample serves every unit.
        predicted = [(x, y, self.evaluate(x)) for x, y in batch]

        size = 2 * self.unit_count
        weight_grads = [0.0] * size
        bias_grads = [0.0] * size

        for unit in range(self.unit_count):
            inner = self.address(0, unit)
            outer = self.address(1, unit)
            outer_weight = self.weights[outer]

            for x, y, y_hat in predicted:
                scale = -2.0 * (y - y_hat)
                pre = self.pre_activation(x, 0, unit)
                hidden = leaky_relu(pre)

                weight_grads[outer] += scale * relu_ish(hidden, y_hat)
                bias_grads[outer] += scale * relu_ish(1.0, y_hat)

                weight_grads[inner] += scale * relu_ish(outer_weight * relu_ish(x, pre), y_hat)
                bias_grads[inner] += scale * relu_ish(outer_weight * relu_ish(1.0, pre), y_hat)

        for unit in range(self.unit_count):
            for offset in (self.address(1, unit), self.address(0, unit)):
                self.weights[offset] -= weight_grads[offset] * learning_rate
                self.biases[offset] -= bias_grads[offset] * learning_rate

    # ------------------------------------------------------------------
    # Training loop
    # ------------------------------------------------------------------
    def train(
        self,
        samples: Sequence[Sample],
        epochs: int,
        batch_size: int,
        learning_rate: float,
        *,
        verbose: bool = True,
        progress: bool = False,
    ) -> TrainingHistory:
        """Run mini-batch gradient descent over ``samples``.

        Batches are consecutive windows of ``batch_size`` samples, visited in
        order every epoch; the last window may be shorter. The cost over all
        samples is reported every ``epochs // 10`` epochs (never when that is
        zero) and recorded in the returned history.
        """

        epochs = _require_int("epochs", epochs)
        batch_size = _require_int("batch_size", batch_size)
        if epochs < 0:
            raise ValueError("epochs must be non-negative")
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self._check_learning_rate(learning_rate)

        history = TrainingHistory()
        report_every = epochs // 10
        epoch_range: Iterable[int] = range(epochs)
        if progress:
            epoch_range = tqdm(epoch_range, desc="Training", unit="epoch")

        for epoch in epoch_range:
            for start in range(0, len(samples), batch_size):
                self._descend(samples[start : start + batch_size], learning_rate)
                history.updates += 1

            if report_every and epoch % report_every == 0:
                cost = self.cost(samples)
                history.record(epoch, cost)
                if verbose:
                    message = f"Epoch {epoch}: {cost}"
                    if progress:
                        tqdm.write(message, file=sys.stderr)
                    else:
                        print(message, file=sys.stderr)

        return history

    def fit(self, samples: Sequence[Sample], config: TrainingConfig, **kwargs) -> TrainingHistory:
        return self.train(
            samples,
            config.epochs,
            config.batch_size,
            config.learning_rate,
            **kwargs,
        )

    @staticmethod
    def _check_learning_rate(learning_rate: float) -> None:
        if not math.isfinite(learning_rate) or learning_rate <= 0.0:
            raise ValueError("learning_rate must be a positive finite number")

    def parameters(self) -> dict[str, Vector]:
        return {"weights": self.weights.copy(), "biases": self.biases.copy()}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unit_count={self.unit_count})"
