# showcase/delivery/schemas/body.py
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

TEXT_CARD_LAYOUT = "text_card"

class PhotoDescriptor(BaseModel):
    # Unknown keys (location, year, EXIF fields...) ride along untouched.
    model_config = ConfigDict(extra="allow", frozen=True)

    url: str
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        """Keys exactly as the caller supplied them, extras included."""
        return self.model_dump(mode="json", exclude_unset=True)

class PhotoSlot(BaseModel):
    photo: PhotoDescriptor
    x: float
    y: float
    w: float
    h: float
    z: int
    rot: float

class PhotoPanel(BaseModel):
    layout: str                            # pattern name
    slots: List[PhotoSlot] = Field(default_factory=list)

class TextCardPanel(BaseModel):
    layout: Literal["text_card"] = TEXT_CARD_LAYOUT
    color: str                             # hex, e.g. "#1A1A1A"
    width: int                             # % of viewport
    height: int
    x: int
    y: int

def _panel_kind(value: Any) -> str:
    layout = value.get("layout") if isinstance(value, dict) else getattr(value, "layout", None)
    return "text_card" if layout == TEXT_CARD_LAYOUT else "photo"

Panel = Annotated[
    Union[
        Annotated[PhotoPanel, Tag("photo")],
        Annotated[TextCardPanel, Tag("text_card")],
    ],
    Discriminator(_panel_kind),
]

def dump_panel(panel: Union[PhotoPanel, TextCardPanel]) -> Dict[str, Any]:
    if isinstance(panel, TextCardPanel):
        return panel.model_dump(mode="json")
    return {
        "layout": panel.layout,
        "slots": [
            {"photo": slot.photo.as_dict(), **slot.model_dump(mode="json", exclude={"photo"})}
            for slot in panel.slots
        ],
    }

def dump_panels(panels) -> List[Dict[str, Any]]:
    return [dump_panel(p) for p in panels]

class ShowcaseRequest(BaseModel):
    # Usually the collection slug
    seed_key: str
    photos: List[PhotoDescriptor] = Field(default_factory=list)

class ShowcaseResponse(BaseModel):
    seed_key: str
    photo_count: int
    panel_count: int
    panels: List[Panel] = Field(default_factory=list)

class SlotDefOut(BaseModel):
    x: float
    y: float
    w: float
    h: float
    z: int
    rot: float

class PatternOut(BaseModel):
    name: str
    slots_needed: int
    preferred_aspect: str
    slots: List[SlotDefOut]

class PatternCatalogResponse(BaseModel):
    patterns: List[PatternOut]
