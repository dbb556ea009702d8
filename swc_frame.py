from typing import Iterable, List
import numpy as np
import pandas as pd

from constants import SWC_COLS
from swc_segment import Segment
from vector3d import Vector3d

SWC_DTYPE = np.dtype([
    ("id",     np.int64),
    ("type",   np.int64),
    ("x",      np.float64),
    ("y",      np.float64),
    ("z",      np.float64),
    ("radius", np.float64),
    ("parent", np.int64),
])


def _rows(segments: Iterable[Segment]):
    for s in segments:
        p = s.position
        yield (int(s.index), int(s.type), float(p.x), float(p.y), float(p.z),
               float(s.radius), int(s.parent))


def segments_to_array(segments: Iterable[Segment]) -> np.ndarray:
    """Structured array with one record per segment (comments are not carried)."""
    return np.array(list(_rows(segments)), dtype=SWC_DTYPE)


def segments_to_frame(segments: Iterable[Segment]) -> pd.DataFrame:
    arr = segments_to_array(segments)
    df = pd.DataFrame({c: arr[c] for c in SWC_COLS}, columns=SWC_COLS)
    return df


def frame_to_segments(df: pd.DataFrame) -> List[Segment]:
    """
    Rebuild segments from a frame holding the SWC columns, in row order.
    Extra columns are ignored; missing ones raise KeyError.
    """
    missing = [c for c in SWC_COLS if c not in df.columns]
    if missing:
        raise KeyError(f"Missing SWC columns: {missing}")

    cols = df[SWC_COLS]
    ids = cols["id"].to_numpy(dtype=np.int64)
    types = cols["type"].to_numpy(dtype=np.int64)
    xyz = cols[["x", "y", "z"]].to_numpy(dtype=np.float64)
    radius = cols["radius"].to_numpy(dtype=np.float64)
    parents = cols["parent"].to_numpy(dtype=np.int64)

    return [
        Segment(int(ids[i]), int(types[i]), Vector3d.from_iterable(xyz[i]),
                float(radius[i]), int(parents[i]))
        for i in range(len(ids))
    ]
