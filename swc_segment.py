from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from constants import label_for_type
from vector3d import Vector3d, float_key


def _comment_list(comments) -> List[str]:
    if comments is None:
        return []
    if isinstance(comments, str):
        return [comments]
    return list(comments)


@dataclass(eq=False)
class Segment:
    """One SWC sample.

    Equality and hashing cover ``index``, ``type``, ``position``, ``radius`` and
    ``parent`` only (NaN equals NaN); attached comment lines are carried along
    but ignored when comparing. A negative ``parent`` marks a root sample.
    """
    index: int
    type: int
    position: Vector3d
    radius: float
    parent: int
    comments: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.comments = _comment_list(self.comments)

    @classmethod
    def of(cls, index: int, type: int, x: float, y: float, z: float,
           radius: float, parent: int) -> "Segment":
        return cls(index, type, Vector3d.xyz(x, y, z), float(radius), parent)

    def key(self) -> Tuple:
        return (self.index, self.type, self.position, float_key(self.radius), self.parent)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def copy(self) -> "Segment":
        return replace(self, comments=list(self.comments))

    def with_comments(self, comments: Iterable[str]) -> "Segment":
        return replace(self, comments=self.comments + _comment_list(comments))

    @property
    def is_root(self) -> bool:
        return self.parent < 0

    @property
    def type_label(self) -> str:
        return label_for_type(self.type)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    def __str__(self) -> str:
        return (f"index: {self.index}, segment type: {self.type}, pos: {self.position}, "
                f"radius: {self.radius}, parent: {self.parent}")


SegmentRef = Union[Segment, int]


def _index_of(ref: SegmentRef) -> int:
    return ref.index if isinstance(ref, Segment) else int(ref)


class NormalAnnotations:
    """Per-segment normal vectors kept beside the segments, keyed by SWC index.

    SWC text has no column for normals, so they never pass through the codec.
    """

    def __init__(self, normals: Optional[Dict[int, Vector3d]] = None):
        self._normals: Dict[int, Vector3d] = {}
        for idx, normal in (normals or {}).items():
            self.set(idx, normal)

    def set(self, ref: SegmentRef, normal) -> None:
        if not isinstance(normal, Vector3d):
            normal = Vector3d.from_iterable(normal)
        self._normals[_index_of(ref)] = normal

    def get(self, ref: SegmentRef, default: Optional[Vector3d] = None) -> Optional[Vector3d]:
        return self._normals.get(_index_of(ref), default)

    def remove(self, ref: SegmentRef) -> None:
        self._normals.pop(_index_of(ref), None)

    def __contains__(self, ref) -> bool:
        return _index_of(ref) in self._normals

    def __len__(self) -> int:
        return len(self._normals)

    def __iter__(self) -> Iterator[int]:
        return iter(self._normals)
