from enum import Enum


class ProjectionType(Enum):
    CYLINDRICAL = "cylindrical"
    SPHERICAL = "spherical"


def select_type_for_size(width: float, height: float) -> ProjectionType:
    # Exact 2:1 only; near-equirect images are treated as cylindrical.
    if height and width / height == 2:
        return ProjectionType.SPHERICAL
    return ProjectionType.CYLINDRICAL


def select_type(image) -> ProjectionType:
    """Pick the mapping surface for an image array (H x W [x C])."""
    if image is None:
        return ProjectionType.CYLINDRICAL
    h, w = image.shape[:2]
    return select_type_for_size(float(w), float(h))
