# showcase/domain/aspect.py
from typing import Any, Iterable, Mapping, Union

from showcase.delivery.schemas.body import PhotoDescriptor
from showcase.domain.patterns import AspectRatio

PORTRAIT_MAX_RATIO = 0.85
LANDSCAPE_MIN_RATIO = 1.15

def _dimensions(photo: Union[PhotoDescriptor, Mapping[str, Any]]):
    if isinstance(photo, Mapping):
        return photo.get("width"), photo.get("height")
    return photo.width, photo.height

def classify_aspect_ratio(photo: Union[PhotoDescriptor, Mapping[str, Any]]) -> AspectRatio:
    width, height = _dimensions(photo)
    if width is None or height is None or height == 0:
        return AspectRatio.ANY

    ratio = width / height
    if ratio < PORTRAIT_MAX_RATIO:
        return AspectRatio.PORTRAIT
    if ratio > LANDSCAPE_MIN_RATIO:
        return AspectRatio.LANDSCAPE
    return AspectRatio.SQUARE

def dominant_aspect(photos: Iterable) -> AspectRatio:
    """Portrait vs landscape majority; squares and unknowns don't vote, ties give ANY."""
    aspects = [classify_aspect_ratio(p) for p in photos]
    portrait_count = aspects.count(AspectRatio.PORTRAIT)
    landscape_count = aspects.count(AspectRatio.LANDSCAPE)

    if portrait_count > landscape_count:
        return AspectRatio.PORTRAIT
    if landscape_count > portrait_count:
        return AspectRatio.LANDSCAPE
    return AspectRatio.ANY
