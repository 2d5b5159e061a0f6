import math
import numpy as np


def _grid_indices(rows: int, cols: int):
    # Outward-facing winding (CCW seen from outside); the renderer culls front
    # faces so the interior is what the camera sees.
    def vid(i, j):
        return i * (cols + 1) + j

    idx = []
    for i in range(rows):
        for j in range(cols):
            a = vid(i, j)
            b = vid(i + 1, j)
            c = vid(i + 1, j + 1)
            d = vid(i, j + 1)
            idx.extend([a, b, c])
            idx.extend([a, c, d])
    return idx


def make_sphere(radius=10.0, segment_count=300):
    """UV sphere with equirect texture coordinates.

    `segment_count` subdivisions around the vertical axis and half as many
    from pole to pole. u follows longitude (u=0.5 faces -Z), v runs from the
    north pole (0) to the south pole (1).
    """
    lon_steps = max(3, int(segment_count))
    lat_steps = max(2, lon_steps // 2)
    verts, uvs = [], []

    for i in range(lat_steps + 1):
        v = i / lat_steps
        lat = (0.5 - v) * math.pi
        cl = math.cos(lat)
        sl = math.sin(lat)
        for j in range(lon_steps + 1):
            u = j / lon_steps
            lon = u * 2.0 * math.pi
            x = radius * cl * math.sin(lon)
            y = radius * sl
            z = radius * cl * math.cos(lon)
            verts.append((x, y, z))
            uvs.append((u, v))

    idx = _grid_indices(lat_steps, lon_steps)
    return (
        np.array(verts, dtype=np.float32),
        np.array(uvs, dtype=np.float32),
        np.array(idx, dtype=np.uint32),
    )


def make_tube(radius=10.0, height=1.0, height_segments=50, radial_segments=300):
    # Open cylinder wall, inner radius == outer radius, no caps.
    radial_segments = max(3, int(radial_segments))
    height_segments = max(1, int(height_segments))
    verts, uvs = [], []

    for i in range(height_segments + 1):
        v = i / height_segments
        y = height * (0.5 - v)
        for j in range(radial_segments + 1):
            u = j / radial_segments
            lon = u * 2.0 * math.pi
            verts.append((radius * math.sin(lon), y, radius * math.cos(lon)))
            uvs.append((u, v))

    idx = _grid_indices(height_segments, radial_segments)
    return (
        np.array(verts, dtype=np.float32),
        np.array(uvs, dtype=np.float32),
        np.array(idx, dtype=np.uint32),
    )


def make_disc(cx, cy, radius, steps=64):
    # Triangle fan: centre first, then the closed rim.
    pts = [(cx, cy)]
    for k in range(steps + 1):
        a = 2.0 * math.pi * k / steps
        pts.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
    return np.array(pts, dtype=np.float32)


def make_ring(cx, cy, radius, width, steps=64):
    # Triangle strip alternating outer/inner rim points.
    r_out = radius + width * 0.5
    r_in = max(0.0, radius - width * 0.5)
    pts = []
    for k in range(steps + 1):
        a = 2.0 * math.pi * k / steps
        ca, sa = math.cos(a), math.sin(a)
        pts.append((cx + r_out * ca, cy + r_out * sa))
        pts.append((cx + r_in * ca, cy + r_in * sa))
    return np.array(pts, dtype=np.float32)


def make_slice(cx, cy, radius, start_angle, sweep, steps=64):
    # Pie slice as a triangle fan from the centre across `sweep` radians.
    n = max(1, int(math.ceil(steps * abs(sweep) / (2.0 * math.pi))))
    pts = [(cx, cy)]
    for k in range(n + 1):
        a = start_angle + sweep * k / n
        pts.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
    return np.array(pts, dtype=np.float32)
