# showcase/domain/showcase_builder.py
import logging
import zlib
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from showcase.config.settings import settings
from showcase.delivery.schemas.body import (
    TEXT_CARD_LAYOUT,
    PhotoDescriptor,
    PhotoPanel,
    PhotoSlot,
    TextCardPanel,
    dump_panels,
)
from showcase.domain.aspect import dominant_aspect
from showcase.domain.patterns import HERO_PATTERN, AspectRatio, Pattern, PatternRegistry, validate_patterns
from showcase.domain.xorshift import XorShift32

# --- CONFIGURATION ---
TEXT_CARD_CHANCE = 0.15
ASPECT_LOOKAHEAD = 4

# Safe area, % of viewport
X_BOUNDS = (65.0, 92.0)
Y_BOUNDS = (18.0, 82.0)
W_BOUNDS = (10.0, 50.0)
H_BOUNDS = (15.0, 80.0)
RIGHT_EDGE = 96.0
BOTTOM_EDGE = 82.0

POSITION_JITTER = 2.0
SIZE_JITTER = 2.5
ROTATION_JITTER = 1.5

# Design system colors
TEXT_CARD_COLORS = [
    "#1A1A1A",  # ink
    "#3A3A3A",  # graphite
    "#2C2C2E",  # gunmetal
    "#5C4033",  # walnut
    "#9A6324",  # cognac
    "#D32F2F",  # signal
    "#00897B",  # teal
    "#F9A825",  # mustard
    "#E64A19",  # persimmon
]
TEXT_CARD_WIDTHS = [25, 30, 35, 40, 45]
TEXT_CARD_HEIGHTS = [30, 40, 50, 60, 70]
TEXT_CARD_XS = [55, 60, 65, 70]     # right-leaning, like the photo clusters
TEXT_CARD_YS = [25, 35, 45]

# --- LOGGER SETUP ---
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] [SHOWCASE] %(message)s', '%Y-%m-%d %H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(settings.LOG_LEVEL)
    logger.propagate = False

PhotoInput = Union[PhotoDescriptor, Mapping[str, Any]]
Panel = Union[PhotoPanel, TextCardPanel]

def seed_from_key(seed_key: str) -> int:
    return zlib.crc32(seed_key.encode("utf-8")) & 0xFFFFFFFF

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

class ShowcaseBuilder:
    """Turns an ordered photo list into an ordered list of showcase panels.

    Layouts are seeded from a key (normally the collection slug), so the same
    collection always gets the same panels while different collections look
    different. Photos are consumed strictly in input order.
    """

    def __init__(self, patterns: Optional[Sequence[Pattern]] = None):
        if patterns is None:
            patterns = PatternRegistry.get_patterns()
        else:
            patterns = list(patterns)
            validate_patterns(patterns)
        self.patterns: List[Pattern] = patterns

    def build(self, photos: Iterable[PhotoInput], seed_key: str) -> List[Panel]:
        queue = [self._as_descriptor(p) for p in photos]
        if not queue:
            return []

        seed = seed_from_key(seed_key)
        rng = XorShift32(seed)

        panels: List[Panel] = []
        remaining = queue
        last_was_text_card = False

        while remaining:
            # The draw is taken even before the first panel so the stream
            # matches layouts that were recorded with it.
            if not last_was_text_card and rng.next_float() < TEXT_CARD_CHANCE and panels:
                panels.append(self._create_text_card(rng))
                last_was_text_card = True
                continue

            last_was_text_card = False

            pattern = self._select_pattern(remaining, rng)
            panel_photos = remaining[:pattern.slots_needed]
            remaining = remaining[pattern.slots_needed:]

            panel = self._create_photo_panel(pattern, panel_photos, rng)
            logger.debug(f"Panel {len(panels)}: '{pattern.name}' with {len(panel.slots)} photo(s), {len(remaining)} left.")
            panels.append(panel)

        text_cards = sum(1 for p in panels if p.layout == TEXT_CARD_LAYOUT)
        logger.info(
            f"Showcase built for seed '{seed_key}' ({seed}): {len(queue)} photos -> "
            f"{len(panels)} panels ({text_cards} text cards)."
        )
        return panels

    def build_json(self, photos: Iterable[PhotoInput], seed_key: str) -> List[Dict[str, Any]]:
        """Same as build(), serialized to the plain dict shape templates consume."""
        return dump_panels(self.build(photos, seed_key))

    @staticmethod
    def _as_descriptor(photo: PhotoInput) -> PhotoDescriptor:
        if isinstance(photo, PhotoDescriptor):
            return photo
        return PhotoDescriptor.model_validate(dict(photo))

    def _candidates(self, remaining_count: int) -> List[Pattern]:
        suitable = [p for p in self.patterns if p.slots_needed <= remaining_count]
        if suitable:
            return suitable

        # Not enough photos for any pattern: fall back to the hero
        fallback = [p for p in self.patterns if p.name == HERO_PATTERN]
        return fallback or [p for p in self.patterns if p.slots_needed == 1]

    def _select_pattern(self, remaining: List[PhotoDescriptor], rng: XorShift32) -> Pattern:
        candidates = self._candidates(len(remaining))
        dominant = dominant_aspect(remaining[:ASPECT_LOOKAHEAD])

        preferred = [
            p for p in candidates
            if p.preferred_aspect == dominant or p.preferred_aspect == AspectRatio.ANY
        ]
        if not preferred:
            preferred = candidates

        return preferred[rng.int_in_range(0, len(preferred) - 1)]

    def _create_photo_panel(self, pattern: Pattern, photos: List[PhotoDescriptor], rng: XorShift32) -> PhotoPanel:
        slots = []
        for slot_def, photo in zip(pattern.slot_defs, photos):
            # Draw order is part of the layout contract: x, y, w, h, rot
            x = _clamp(rng.jitter(slot_def.x, POSITION_JITTER), *X_BOUNDS)
            y = _clamp(rng.jitter(slot_def.y, POSITION_JITTER), *Y_BOUNDS)
            w = _clamp(rng.jitter(slot_def.w, SIZE_JITTER), *W_BOUNDS)
            h = _clamp(rng.jitter(slot_def.h, SIZE_JITTER), *H_BOUNDS)
            rot = rng.jitter(slot_def.rot, ROTATION_JITTER)

            # Keep the slot inside the right edge without going under minimum width
            if x + w > RIGHT_EDGE:
                w = RIGHT_EDGE - x
                if w < W_BOUNDS[0]:
                    w = W_BOUNDS[0]
                    x = RIGHT_EDGE - w

            # Same for the bottom edge. Slots that used to end up shorter than
            # the minimum (mostly strip_3's last one) now differ from older layouts.
            if y + h > BOTTOM_EDGE:
                h = BOTTOM_EDGE - y
                if h < H_BOUNDS[0]:
                    h = H_BOUNDS[0]
                    y = BOTTOM_EDGE - h

            slots.append(PhotoSlot(
                photo=photo,
                x=round(x, 2),
                y=round(y, 2),
                w=round(w, 2),
                h=round(h, 2),
                z=slot_def.z,
                rot=round(rot, 2),
            ))

        return PhotoPanel(layout=pattern.name, slots=slots)

    @staticmethod
    def _create_text_card(rng: XorShift32) -> TextCardPanel:
        color = TEXT_CARD_COLORS[rng.int_in_range(0, len(TEXT_CARD_COLORS) - 1)]
        width = TEXT_CARD_WIDTHS[rng.int_in_range(0, len(TEXT_CARD_WIDTHS) - 1)]
        height = TEXT_CARD_HEIGHTS[rng.int_in_range(0, len(TEXT_CARD_HEIGHTS) - 1)]
        x = TEXT_CARD_XS[rng.int_in_range(0, len(TEXT_CARD_XS) - 1)]
        y = TEXT_CARD_YS[rng.int_in_range(0, len(TEXT_CARD_YS) - 1)]

        return TextCardPanel(layout=TEXT_CARD_LAYOUT, color=color, width=width, height=height, x=x, y=y)
