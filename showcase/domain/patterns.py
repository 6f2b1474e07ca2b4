# showcase/domain/patterns.py
"""Layout patterns for the photo showcase.

A pattern says how many photos go into one panel and where each of them
sits before jitter. Positions and sizes are percentages of the panel
viewport; the reference geometry anchors every cluster on the right-hand
side of the screen, leaving the left side free for captions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

HERO_PATTERN = "hero_right"

class AspectRatio(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    SQUARE = "square"
    ANY = "any"

@dataclass(frozen=True)
class SlotDef:
    x: float    # % from left edge
    y: float    # % from top edge
    w: float    # % of panel width
    h: float    # % of panel height
    z: int      # higher = on top
    rot: float  # degrees, positive = clockwise

@dataclass(frozen=True)
class Pattern:
    name: str
    slots_needed: int
    slot_defs: Tuple[SlotDef, ...]
    preferred_aspect: AspectRatio = AspectRatio.ANY

    def __post_init__(self):
        if self.slots_needed < 1:
            raise ValueError(f"Pattern '{self.name}' needs at least one slot")
        if len(self.slot_defs) != self.slots_needed:
            raise ValueError(
                f"Pattern '{self.name}' declares {self.slots_needed} slots "
                f"but defines {len(self.slot_defs)}"
            )

_CATALOG: Tuple[Pattern, ...] = (
    # Hero - single large image, right-anchored
    Pattern(
        name=HERO_PATTERN,
        slots_needed=1,
        slot_defs=(
            SlotDef(x=65.0, y=32.0, w=32.0, h=54.0, z=1, rot=0.0),
        ),
        preferred_aspect=AspectRatio.ANY,
    ),
    # Duo tall - two portraits, slight overlap
    Pattern(
        name="duo_tall",
        slots_needed=2,
        slot_defs=(
            SlotDef(x=64.0, y=24.0, w=20.0, h=48.0, z=1, rot=0.0),
            SlotDef(x=80.0, y=38.0, w=18.0, h=44.0, z=2, rot=-0.8),
        ),
        preferred_aspect=AspectRatio.PORTRAIT,
    ),
    # Stack 3 - three overlapping images
    Pattern(
        name="stack_3",
        slots_needed=3,
        slot_defs=(
            SlotDef(x=58.0, y=24.0, w=26.0, h=36.0, z=1, rot=0.5),
            SlotDef(x=70.0, y=38.0, w=24.0, h=34.0, z=2, rot=-1.0),
            SlotDef(x=64.0, y=54.0, w=22.0, h=30.0, z=3, rot=0.3),
        ),
        preferred_aspect=AspectRatio.ANY,
    ),
    # Floating 2 - two larger floats, well separated
    Pattern(
        name="floating_2",
        slots_needed=2,
        slot_defs=(
            SlotDef(x=64.0, y=18.0, w=24.0, h=30.0, z=1, rot=-0.5),
            SlotDef(x=72.0, y=62.0, w=22.0, h=28.0, z=2, rot=1.2),
        ),
        preferred_aspect=AspectRatio.LANDSCAPE,
    ),
    # Strip 3 - three medium images in a vertical cluster
    Pattern(
        name="strip_3",
        slots_needed=3,
        slot_defs=(
            SlotDef(x=68.0, y=18.0, w=22.0, h=20.0, z=1, rot=0.0),
            SlotDef(x=72.0, y=44.0, w=20.0, h=22.0, z=2, rot=-0.6),
            SlotDef(x=66.0, y=72.0, w=21.0, h=18.0, z=3, rot=0.8),
        ),
        preferred_aspect=AspectRatio.LANDSCAPE,
    ),
    # Large + small - one dominant, one accent
    Pattern(
        name="large_small",
        slots_needed=2,
        slot_defs=(
            SlotDef(x=62.0, y=30.0, w=30.0, h=50.0, z=1, rot=0.0),
            SlotDef(x=84.0, y=64.0, w=12.0, h=16.0, z=2, rot=-1.5),
        ),
        preferred_aspect=AspectRatio.ANY,
    ),
    # Quad cluster - four images with more breathing room
    Pattern(
        name="quad_cluster",
        slots_needed=4,
        slot_defs=(
            SlotDef(x=58.0, y=18.0, w=20.0, h=26.0, z=1, rot=0.3),
            SlotDef(x=78.0, y=22.0, w=18.0, h=24.0, z=2, rot=-0.8),
            SlotDef(x=56.0, y=54.0, w=22.0, h=24.0, z=3, rot=1.0),
            SlotDef(x=76.0, y=60.0, w=18.0, h=22.0, z=4, rot=-0.4),
        ),
        preferred_aspect=AspectRatio.ANY,
    ),
    # Vertical pair - two images stacked
    Pattern(
        name="vertical_pair",
        slots_needed=2,
        slot_defs=(
            SlotDef(x=68.0, y=20.0, w=24.0, h=26.0, z=1, rot=0.0),
            SlotDef(x=66.0, y=60.0, w=26.0, h=28.0, z=2, rot=-0.6),
        ),
        preferred_aspect=AspectRatio.LANDSCAPE,
    ),
    # Single portrait - tall portrait on the right edge
    Pattern(
        name="single_portrait",
        slots_needed=1,
        slot_defs=(
            SlotDef(x=72.0, y=28.0, w=22.0, h=58.0, z=1, rot=0.0),
        ),
        preferred_aspect=AspectRatio.PORTRAIT,
    ),
    # Wide landscape - single wide image
    Pattern(
        name="wide_landscape",
        slots_needed=1,
        slot_defs=(
            SlotDef(x=58.0, y=40.0, w=38.0, h=30.0, z=1, rot=0.0),
        ),
        preferred_aspect=AspectRatio.LANDSCAPE,
    ),
)

def validate_patterns(patterns: Sequence[Pattern]) -> None:
    """Reject catalogs the builder cannot always lay out with."""
    if not patterns:
        raise ValueError("Pattern catalog is empty")

    names = [p.name for p in patterns]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate pattern names in catalog: {', '.join(duplicates)}")

    # A remainder of one photo must always have somewhere to go
    if not any(p.slots_needed == 1 for p in patterns):
        raise ValueError("Pattern catalog has no single-slot pattern")

class PatternRegistry:
    @staticmethod
    def get_patterns() -> List[Pattern]:
        """All layout patterns, always in the same order."""
        return list(_CATALOG)

validate_patterns(_CATALOG)
