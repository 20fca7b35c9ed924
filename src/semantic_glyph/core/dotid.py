"""DotId codec.

Ten fixed dot signatures built from three primitives. The counting resembles
Roman numerals but is not Roman: 4 and 9 subtract a single unit, 8 clusters
two units in front of ten, and 3, 7 and 8 are drawn as a two-over-one cluster.
DotIds are local labels, valid only inside one document.
"""

from types import MappingProxyType

from semantic_glyph.models import ClusterLayout, DotId

UNIT = "•"  # U+2022
FIVE = "○"  # U+25CB
TEN = "⦿"  # U+29BF

PRIMITIVE_VALUES: dict[str, int] = {UNIT: 1, FIVE: 5, TEN: 10}

DOT_CHARS: frozenset[str] = frozenset(PRIMITIVE_VALUES)

# Smaller variants used when rendering beneath a term.
_NIKKUD = str.maketrans({UNIT: "·", FIVE: "◦"})

MIN_VALUE = 1
MAX_VALUE = 10

_SIGNATURES: dict[int, str] = {
    1: UNIT,
    2: UNIT * 2,
    3: UNIT * 3,
    4: UNIT + FIVE,
    5: FIVE,
    6: FIVE + UNIT,
    7: FIVE + UNIT * 2,
    8: UNIT * 2 + TEN,
    9: UNIT + TEN,
    10: TEN,
}

_CLUSTERS: dict[int, ClusterLayout] = {
    3: ClusterLayout(top=(UNIT, UNIT), bottom=UNIT),
    7: ClusterLayout(top=(FIVE, UNIT), bottom=UNIT),
    8: ClusterLayout(top=(UNIT, UNIT), bottom=TEN),
}

DOT_IDS: tuple[DotId, ...] = tuple(
    DotId(
        value=value,
        signature=signature,
        primitives=tuple(signature),
        is_cluster=value in _CLUSTERS,
        cluster=_CLUSTERS.get(value),
    )
    for value, signature in _SIGNATURES.items()
)

VALUE_TO_DOTID = MappingProxyType({d.value: d for d in DOT_IDS})
SIGNATURE_TO_DOTID = MappingProxyType({d.signature: d for d in DOT_IDS})


def dotid_for(value: int) -> DotId | None:
    return VALUE_TO_DOTID.get(value)


def dotid_from_signature(signature: str) -> DotId | None:
    """Exact lookup; partial or reordered signatures do not resolve."""
    return SIGNATURE_TO_DOTID.get(signature)


def encode(value: int) -> str | None:
    dotid = VALUE_TO_DOTID.get(value)
    return dotid.signature if dotid else None


def decode(signature: str) -> int | None:
    dotid = SIGNATURE_TO_DOTID.get(signature)
    return dotid.value if dotid else None


def is_valid_signature(signature: str) -> bool:
    return signature in SIGNATURE_TO_DOTID


def is_dot_char(char: str) -> bool:
    return char in DOT_CHARS


def parse_dot_signature(signature: str) -> DotId | None:
    if not signature or any(ch not in DOT_CHARS for ch in signature):
        return None
    return SIGNATURE_TO_DOTID.get(signature)


def next_dotid(current_max: int) -> DotId | None:
    if current_max >= MAX_VALUE:
        return None
    return VALUE_TO_DOTID.get(max(current_max, 0) + 1)


def primitive_sum(primitives: str | tuple[str, ...]) -> int:
    """Numeric value of a primitive sequence.

    The largest primitive is the anchor: primitives in front of it subtract,
    primitives after it add.
    """
    values = [PRIMITIVE_VALUES[p] for p in primitives]
    if not values:
        return 0
    anchor = values.index(max(values))
    return values[anchor] - sum(values[:anchor]) + sum(values[anchor + 1 :])


def to_nikkud_size(signature: str) -> str:
    return signature.translate(_NIKKUD)
