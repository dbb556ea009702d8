import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union
import numpy as np


def float_key(v: float) -> Union[float, str]:
    """Comparison key for a float: every NaN gets the same key."""
    return "nan" if math.isnan(v) else v


@dataclass(frozen=True, eq=False)
class Vector3d:
    x: float
    y: float
    z: float

    @classmethod
    def xyz(cls, x: float, y: float, z: float) -> "Vector3d":
        return cls(float(x), float(y), float(z))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector3d":
        vals = [float(v) for v in values]
        if len(vals) != 3:
            raise ValueError(f"Expected 3 components, got {len(vals)}")
        return cls(*vals)

    def key(self) -> Tuple:
        return (float_key(self.x), float_key(self.y), float_key(self.z))

    def __eq__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"
