"""Neurons and layers that connect uniformly through iteration."""

from __future__ import annotations

from typing import Iterable, Iterator


class Neuron:
    """A single neuron with incoming and outgoing connections."""

    def __init__(self) -> None:
        self.inputs: list[Neuron] = []
        self.outputs: list[Neuron] = []

    def connect_to(self, other: Neuron) -> None:
        self.outputs.append(other)
        other.inputs.append(self)

    def __iter__(self) -> Iterator[Neuron]:
        yield self

    def __repr__(self) -> str:
        return f"Neuron(inputs={len(self.inputs)}, outputs={len(self.outputs)})"


class NeuronLayer:
    """A layer of neurons."""

    def __init__(self, count: int = 0) -> None:
        self.neurons: list[Neuron] = [Neuron() for _ in range(count)]

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self.neurons)

    def __len__(self) -> int:
        return len(self.neurons)

    def __repr__(self) -> str:
        return f"NeuronLayer({len(self.neurons)})"


def connect(left: Iterable[Neuron], right: Iterable[Neuron]) -> None:
    """Connect every neuron on the left to every neuron on the right."""
    targets = list(right)
    for source in left:
        for target in targets:
            source.connect_to(target)


def demo() -> None:
    """Wire up neurons and layers."""
    n1, n2 = Neuron(), Neuron()
    layer1, layer2 = NeuronLayer(3), NeuronLayer(4)
    connect(n1, n2)
    connect(n1, layer1)
    connect(layer2, n1)
    connect(layer1, layer2)
    print(n1, n2, layer1, layer2)