"""Integer plane geometry: points, vectors, distances, hulls and polygon tests."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Vector:
    """Free vector with integer coordinates."""

    x: int
    y: int

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def dot(self, other: Vector) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> int:
        return self.x * other.y - self.y * other.x

    def length_sq(self) -> int:
        return self.x * self.x + self.y * self.y


@dataclass(frozen=True)
class Point:
    """Point with integer coordinates, ordered by x and then by y."""

    x: int
    y: int

    def __add__(self, other):
        if isinstance(other, (Point, Vector)):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)


def _side(start: Point, end: Point, point: Point) -> int:
    """Signed doubled area of the triangle; its sign tells the side of the line."""
    return (end - start).cross(point - start)


def dist_line(start: Point, end: Point, point: Point) -> float:
    """Distance from ``point`` to the line through ``start`` and ``end``."""
    base = (end - start).length_sq()
    if base == 0:
        return math.sqrt((point - start).length_sq())
    return abs((start - point).cross(end - point)) / math.sqrt(base)


def dist_ray(start: Point, end: Point, point: Point) -> float:
    """Distance from ``point`` to the ray leaving ``start`` through ``end``."""
    first = point - start
    if first.dot(end - start) < 0:
        return math.sqrt(first.length_sq())
    return dist_line(start, end, point)


def dist_segment(start: Point, end: Point, point: Point) -> float:
    """Distance from ``point`` to the segment between ``start`` and ``end``."""
    first = point - start
    second = point - end
    if first.dot(end - start) >= 0 and second.dot(start - end) >= 0:
        return dist_line(start, end, point)
    return math.sqrt(min(first.length_sq(), second.length_sq()))


def segments_intersect(first_start: Point, first_end: Point,
                       second_start: Point, second_end: Point) -> bool:
    """Whether two closed segments share at least one point."""
    first = _side(first_start, first_end, second_start)
    second = _side(first_start, first_end, second_end)
    third = _side(second_start, second_end, first_start)
    fourth = _side(second_start, second_end, first_end)
    if first * second > 0 or third * fourth > 0:
        return False
    if first == second == third == fourth == 0:
        apart = (
            (first_start - second_start).dot(first_end - second_start) > 0
            and (second_start - first_start).dot(second_end - first_start) > 0
            and (first_start - second_end).dot(first_end - second_end) > 0
            and (second_start - first_end).dot(second_end - first_end) > 0
        )
        if apart:
            return False
    return True


def dist_between_segments(first_start: Point, first_end: Point,
                          second_start: Point, second_end: Point) -> float:
    """Shortest distance between two closed segments."""
    if segments_intersect(first_start, first_end, second_start, second_end):
        return 0.0
    return min(
        dist_segment(first_start, first_end, second_start),
        dist_segment(first_start, first_end, second_end),
        dist_segment(second_start, second_end, first_start),
        dist_segment(second_start, second_end, first_end),
    )


def _cyclic_triples(polygon: Sequence[Point]) -> Iterator[tuple[Point, Point, Point]]:
    size = len(polygon)
    for i, point in enumerate(polygon):
        yield point, polygon[(i + 1) % size], polygon[(i + 2) % size]


def is_convex(polygon: Sequence[Point]) -> bool:
    """Whether the vertex sequence bounds a convex polygon.

    Collinear runs are allowed unless they turn back; a polygon whose
    vertices all lie on one line is not convex.
    """
    if len(polygon) < 3:
        return False
    turns = [(b - a, c - b) for a, b, c in _cyclic_triples(polygon)]
    first_turn = next((u.cross(w) for u, w in turns if u.cross(w) != 0), 0)
    if first_turn == 0:
        return False
    positive = first_turn > 0
    for incoming, outgoing in turns:
        cross = incoming.cross(outgoing)
        if cross == 0:
            if incoming.dot(outgoing) < 0:
                return False
        elif (cross > 0) != positive:
            return False
    return True


def _crosses_strictly(first_start: Point, first_end: Point,
                      second_start: Point, second_end: Point) -> bool:
    return (
        _side(first_start, first_end, second_start) * _side(first_start, first_end, second_end) < 0
        and _side(second_start, second_end, first_start) * _side(second_start, second_end, first_end) < 0
    )


def is_on_segment(start: Point, end: Point, point: Point) -> bool:
    """Whether ``point`` lies on the closed segment from ``start`` to ``end``."""
    if _side(start, end, point) != 0:
        return False
    return (
        min(start.x, end.x) <= point.x <= max(start.x, end.x)
        and min(start.y, end.y) <= point.y <= max(start.y, end.y)
    )


def is_inside(polygon: Sequence[Point], point: Point, far_point: Point) -> bool:
    """Whether ``point`` lies in a simple polygon or on its boundary.

    Crossings are counted along the segment from ``point`` to ``far_point``,
    which must lie outside the polygon.
    """
    crossings = 0
    previous = polygon[-1]
    size = len(polygon)
    for i, vertex in enumerate(polygon):
        following = polygon[(i + 1) % size]
        if _crosses_strictly(point, far_point, vertex, following):
            crossings += 1
        if is_on_segment(vertex, following, point):
            return True
        if is_on_segment(point, far_point, vertex):
            if _side(point, far_point, previous) * _side(point, far_point, following) <= 0:
                crossings += 1
        previous = vertex
    return crossings % 2 == 1


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Convex hull by the monotone chain, without collinear boundary points.

    With two or fewer distinct points the sorted distinct points are returned.
    """
    ordered = sorted(set(points))
    if len(ordered) <= 2:
        return ordered
    left, right = ordered[0], ordered[-1]
    axis = left - right
    upper = [left]
    lower = [left]
    for point in ordered:
        turn = axis.cross(point - right)
        if point == right or turn < 0:
            while len(upper) >= 2 and (upper[-2] - point).cross(upper[-1] - point) >= 0:
                upper.pop()
            upper.append(point)
        if point == right or turn > 0:
            while len(lower) >= 2 and (lower[-2] - point).cross(lower[-1] - point) <= 0:
                lower.pop()
            lower.append(point)
    return upper + lower[-2:0:-1]


def double_area(polygon: Sequence[Point]) -> int:
    """Twice the area of a convex polygon, summed over a fan from the first vertex."""
    if len(polygon) < 3:
        return 0
    origin = polygon[0]
    return sum(
        abs((a - origin).cross(b - origin))
        for a, b in zip(polygon[1:-1], polygon[2:])
    )


def leftmost_index(polygon: Sequence[Point]) -> int:
    """Index of the first vertex with the smallest x, then smallest y."""
    if not polygon:
        raise ValueError("polygon has no vertices")
    return min(range(len(polygon)), key=lambda i: (polygon[i].x, polygon[i].y))


def minkowski_sum(first: Sequence[Point], first_left: int,
                  second: Sequence[Point], second_left: int) -> list[Point]:
    """Minkowski sum of two convex polygons given counter-clockwise.

    ``first_left`` and ``second_left`` are the indices of their leftmost
    vertices; the result starts at the sum of those two.
    """
    size1, size2 = len(first), len(second)
    if not size1 or not size2:
        return []
    ind1 = ind2 = 0
    current = first[first_left] + second[second_left]
    result = [current]
    while ind1 < size1 or ind2 < size2:
        first_next = first[(first_left + ind1 + 1) % size1] - first[(first_left + ind1) % size1]
        second_next = second[(second_left + ind2 + 1) % size2] - second[(second_left + ind2) % size2]
        turn = first_next.cross(second_next)
        if turn > 0:
            current = current + first_next
            ind1 += 1
        elif turn < 0:
            current = current + second_next
            ind2 += 1
        else:
            current = current + second_next + first_next
            ind1 += 1
            ind2 += 1
        if current == result[0]:
            break
        result.append(current)
    return result


def is_inside_convex(polygon: Sequence[Point], point: Point) -> bool:
    """Whether ``point`` lies in a counter-clockwise convex polygon, boundary included."""
    size = len(polygon)
    if size == 0:
        return False
    anchor = polygon[0]
    origin = point - anchor
    low, high = 0, size
    while high - low > 1:
        mid = (low + high) // 2
        mid_vect = polygon[mid % size] - anchor
        turn = mid_vect.cross(origin)
        if turn > 0:
            low = mid
        elif turn < 0:
            high = mid
        else:
            if mid_vect.dot(origin) < 0:
                return False
            return origin.length_sq() <= mid_vect.length_sq()
    closing = polygon[high % size]
    return (point - closing).cross(polygon[low] - closing) >= 0


def triple_sum_contains(polygons: Sequence[Sequence[Point]],
                        requests: Sequence[Point]) -> list[bool]:
    """For each request, whether it lies in the Minkowski sum of three convex polygons."""
    if len(polygons) != 3:
        raise ValueError("exactly three polygons are required")
    a, b, c = polygons
    partial = minkowski_sum(a, leftmost_index(a), b, leftmost_index(b))
    total = minkowski_sum(c, leftmost_index(c), partial, 0)
    return [is_inside_convex(total, point) for point in requests]


def _read_points(numbers: Iterator[int], count: int) -> list[Point]:
    return [Point(next(numbers), next(numbers)) for _ in range(count)]


def main(argv=None) -> int:
    """Read three polygons and query points; say whether each is a centroid of three picks."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    polygons = [_read_points(numbers, next(numbers)) for _ in range(3)]
    queries = _read_points(numbers, next(numbers))
    scaled = [Point(3 * q.x, 3 * q.y) for q in queries]
    for found in triple_sum_contains(polygons, scaled):
        print("YES" if found else "NO")
    return 0