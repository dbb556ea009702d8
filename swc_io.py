import io
import os
import re
import logging
from typing import Callable, IO, Iterable, Iterator, List, Optional, Tuple, Union

from constants import COMMENT_PREFIX, FIELD_NAMES, SWC_FIELD_COUNT
from errors import SWCFormatError
from swc_segment import Segment
from vector3d import Vector3d

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_NEWLINE = re.compile(r"\r\n|\r|\n")


# ---------- parsing ----------
def _parse_token(tok: str, convert: Callable, col: int, line: str,
                 element: Optional[int], line_number: Optional[int]):
    # int()/float() accept digit-group underscores; SWC numbers never contain them
    try:
        if "_" in tok:
            raise ValueError(tok)
        return convert(tok)
    except ValueError:
        raise SWCFormatError(line, field=FIELD_NAMES[col], token=tok,
                             line_number=line_number, element=element) from None


def parse_swc_line(line: str, line_number: Optional[int] = None) -> Segment:
    """
    Parse one SWC data line: ``index type x y z radius parent``.

    Raises SWCFormatError when the line does not hold exactly seven
    whitespace-separated tokens or when a token is not a number of the
    column's kind. No range checks are made. The returned segment has no
    comments.
    """
    parts = line.split()
    if len(parts) != SWC_FIELD_COUNT:
        raise SWCFormatError(line, count=len(parts), line_number=line_number)

    index = _parse_token(parts[0], int, 0, line, None, line_number)
    swc_type = _parse_token(parts[1], int, 1, line, index, line_number)
    x, y, z, radius = (
        _parse_token(parts[col], float, col, line, index, line_number)
        for col in range(2, 6)
    )
    parent = _parse_token(parts[6], int, 6, line, index, line_number)

    return Segment(index, swc_type, Vector3d(x, y, z), radius, parent)


def _iter_lines(stream: Iterable) -> Iterator[Tuple[int, str]]:
    """Numbered text lines, split on \\n, \\r\\n and bare \\r whatever the source."""
    n = 0
    for chunk in stream:
        if isinstance(chunk, bytes):
            pieces = chunk.splitlines()
        else:
            pieces = _NEWLINE.split(chunk)
            if pieces[-1] == "":
                pieces.pop()
        for piece in pieces:
            n += 1
            if isinstance(piece, bytes):
                try:
                    piece = piece.decode("utf-8")
                except UnicodeDecodeError:
                    logger.warning("Invalid UTF-8 on line %d, undecodable bytes replaced", n)
                    piece = piece.decode("utf-8", errors="replace")
            if n == 1:
                piece = piece.lstrip("\ufeff")
            yield n, piece


def parse_swc_stream(stream: Iterable) -> List[Segment]:
    """
    Read SWC segments from a text or binary stream (binary is decoded as UTF-8,
    invalid bytes replaced by U+FFFD).

    Comment lines accumulate and attach to the next data line; blank lines are
    skipped. Comments left over at the end are dropped with a warning. The
    stream is read to the end but stays open: whoever opened it closes it.
    """
    segments: List[Segment] = []
    comments: List[str] = []

    for n, raw in _iter_lines(stream):
        s = raw.strip()
        if not s:
            continue
        if s.startswith(COMMENT_PREFIX):
            comments.append(s)
            continue

        segment = parse_swc_line(s, line_number=n)
        if comments:
            segment = segment.with_comments(comments)
            comments = []
        segments.append(segment)

    if comments:
        logger.warning("Skipping %d comment line(s) at end of file!", len(comments))

    logger.debug("Parsed %d SWC segment(s)", len(segments))
    return segments


def parse_swc_text(text: str) -> List[Segment]:
    return parse_swc_stream(io.StringIO(text))


def parse_swc_bytes(data: bytes) -> List[Segment]:
    return parse_swc_stream(io.BytesIO(data))


def read_swc_file(path: PathLike) -> List[Segment]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_swc_stream(f)


# ---------- writing ----------
def _comment_lines(comment: str) -> List[str]:
    # every emitted comment line must start with '#' or it reads back as data
    out = []
    for piece in _NEWLINE.split(comment):
        if not piece.lstrip().startswith(COMMENT_PREFIX):
            piece = f"{COMMENT_PREFIX} {piece}" if piece.strip() else COMMENT_PREFIX
        out.append(piece)
    return out


def format_swc_segment(segment: Segment) -> str:
    """
    Comment lines followed by the data line, newline-joined, no trailing newline.

    Comments are written verbatim when they already start with '#'. Otherwise
    '# ' is prepended, and a comment holding line breaks becomes several
    comment lines.
    """
    p = segment.position
    data = " ".join([
        str(int(segment.index)),
        str(int(segment.type)),
        repr(float(p.x)),
        repr(float(p.y)),
        repr(float(p.z)),
        repr(float(segment.radius)),
        str(int(segment.parent)),
    ])
    lines = [line for c in segment.comments for line in _comment_lines(c)]
    return "\n".join(lines + [data])


def _is_binary(f) -> bool:
    if isinstance(f, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(f, "mode", "")


def write_swc_to_stream(segments: Iterable[Segment], out: IO) -> None:
    """
    Write segments in the given order to a text or binary sink, one block per
    segment, each terminated by a newline. The sink is not closed.
    """
    binary = _is_binary(out)
    count = 0
    for segment in segments:
        block = format_swc_segment(segment) + "\n"
        out.write(block.encode("utf-8") if binary else block)
        count += 1
    logger.debug("Wrote %d SWC segment(s)", count)


def write_swc_to_text(segments: Iterable[Segment]) -> str:
    buf = io.StringIO()
    write_swc_to_stream(segments, buf)
    return buf.getvalue()


def write_swc_to_bytes(segments: Iterable[Segment]) -> bytes:
    return write_swc_to_text(segments).encode("utf-8")


def write_swc_file(segments: Iterable[Segment], path: PathLike) -> None:
    out_dir = os.path.dirname(os.fspath(path))
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        write_swc_to_stream(segments, f)
