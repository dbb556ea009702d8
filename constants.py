SWC_COLS = ["id", "type", "x", "y", "z", "radius", "parent"]

SWC_FIELD_COUNT = len(SWC_COLS)

COMMENT_PREFIX = "#"

# Names used when reporting a token that fails to parse, by column position.
FIELD_NAMES = [
    "index",
    "element type",
    "x coordinate",
    "y coordinate",
    "z coordinate",
    "radius",
    "parent index",
]

TYPE_LABEL = {
    0: "undefined",
    1: "soma",
    2: "axon",
    3: "basal dendrite",
    4: "apical dendrite",
}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

def label_for_type(t: int) -> str:
    t = int(t)
    return TYPE_LABEL.get(t, "custom") if t <= 4 else "custom"
