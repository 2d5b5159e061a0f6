import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from panoview.constants import RADIUS, SPHERE_SEGMENTS, TUBE_HEIGHT_SEGMENTS, TUBE_RADIAL_SEGMENTS
from panoview.geometry import make_sphere, make_tube
from panoview.projection import ProjectionType

logger = logging.getLogger(__name__)


@dataclass
class Material:
    image: np.ndarray
    uv_scale_x: float = -1.0  # horizontal mirror
    wrap_s: str = "repeat"
    wrap_t: str = "clamp"
    filter: str = "nearest"
    cull_face: str = "front"  # camera sits inside the surface


@dataclass
class GeometryNode:
    kind: ProjectionType
    vertices: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray
    material: Material
    params: dict = field(default_factory=dict)

    @property
    def index_count(self) -> int:
        return len(self.indices)


def build_geometry_node(projection_type: ProjectionType, image: np.ndarray,
                        fov_height: float, radius: float = RADIUS) -> GeometryNode:
    material = Material(image=image)
    if projection_type == ProjectionType.SPHERICAL:
        verts, uvs, idx = make_sphere(radius=radius, segment_count=SPHERE_SEGMENTS)
        params = {"radius": radius, "segment_count": SPHERE_SEGMENTS}
    else:
        verts, uvs, idx = make_tube(
            radius=radius,
            height=fov_height,
            height_segments=TUBE_HEIGHT_SEGMENTS,
            radial_segments=TUBE_RADIAL_SEGMENTS,
        )
        params = {
            "inner_radius": radius,
            "outer_radius": radius,
            "height": fov_height,
            "height_segments": TUBE_HEIGHT_SEGMENTS,
            "radial_segments": TUBE_RADIAL_SEGMENTS,
        }
    return GeometryNode(projection_type, verts, uvs, idx, material, params)


class Scene:
    """Holds zero or one panorama surface.

    `generation` bumps on every swap so the renderer can tell when its GPU
    copy is stale.
    """

    def __init__(self):
        self._geometry_node: Optional[GeometryNode] = None
        self.generation = 0

    @property
    def geometry_node(self) -> Optional[GeometryNode]:
        return self._geometry_node

    def rebuild_geometry(self, projection_type: ProjectionType, image: Optional[np.ndarray],
                         fov_height: float, radius: float = RADIUS) -> Optional[GeometryNode]:
        if image is None:
            return None

        node = build_geometry_node(projection_type, image, fov_height, radius)
        # Swap in one step: never zero or two nodes attached.
        self._geometry_node, old = node, self._geometry_node
        self.generation += 1
        if old is not None:
            logger.debug("Detached %s geometry", old.kind.value)
        h, w = image.shape[:2]
        logger.info("[scene] %s geometry for %dx%d image (%d triangles)",
                    projection_type.value, w, h, node.index_count // 3)
        return node
