"""Tests for the geometry state machines -- depth, arity, rings, parts."""

import pytest

from geowkt import loads, tokenize
from geowkt.errors import MalformedNestingError
from geowkt.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geowkt.tokens import Token, TokenKind


def feed(obj, text):
    """Push every token of text into obj, recording finished after each."""
    states = []
    for token in tokenize(text):
        obj.handle_token(token)
        states.append(obj.finished)
    return states


class TestStateMachine:
    """OPEN -> FINISHED transitions."""

    def test_finishes_on_balancing_paren(self):
        """A polygon finishes only when depth returns to zero."""
        polygon = Polygon()
        states = feed(polygon, "((0 0, 1 0, 1 1, 0 0))")
        assert states[-1] is True
        assert not any(states[:-1])

    def test_tokens_after_finish_rejected(self):
        """A finished object accepts no further tokens."""
        point = loads("POINT (1 2)")
        with pytest.raises(MalformedNestingError):
            point.handle_token(Token(TokenKind.COMMA))

    def test_empty_finishes_immediately(self):
        """EMPTY finishes an object without any parentheses."""
        point = loads("POINT EMPTY")
        assert point.finished
        assert point.is_empty
        assert point.coordinates == []

    def test_tagged_empty(self):
        """A tag may precede EMPTY."""
        polygon = loads("POLYGON ZM EMPTY")
        assert polygon.is_empty
        assert polygon.dimensions == "ZM"
        assert polygon.rings == []

    def test_invalid_tag(self):
        """Words other than Z, M, ZM or EMPTY before the body are rejected."""
        with pytest.raises(MalformedNestingError):
            loads("POINT Q (1 2)")

    def test_keyword_inside_body(self):
        """Keywords inside a simple geometry are rejected."""
        with pytest.raises(MalformedNestingError):
            loads("LINESTRING (1 2, Z 3 4)")

    def test_repr_shows_state(self):
        """repr names the class, keyword and state."""
        assert repr(loads("POINT Z (1 2 3)")) == "<Point POINT Z finished>"


class TestArity:
    """Tuples must hold exactly as many numbers as the tag requires."""

    def test_short_tuple_before_comma(self):
        """A tuple cut short by a comma is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("LINESTRING (1 2, 3, 4 5)")

    def test_short_tuple_before_paren(self):
        """A tuple cut short by ')' is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("LINESTRING (1 2, 3)")

    def test_two_values_for_z(self):
        """A Z geometry needs three values per tuple."""
        with pytest.raises(MalformedNestingError):
            loads("POINT Z (1 2)")

    def test_extra_value(self):
        """A third value in a 2D point is a dangling partial tuple."""
        with pytest.raises(MalformedNestingError):
            loads("POINT (1 2 3)")

    def test_zm_reads_four_values(self):
        """ZM tuples carry x, y, z and m."""
        line = loads("LINESTRING ZM (1 2 3 4, 5 6 7 8)")
        assert line.arity == 4
        assert line.coordinates == [(1.0, 2.0, 3.0, 4.0), (5.0, 6.0, 7.0, 8.0)]

    def test_point_takes_one_coordinate(self):
        """A POINT with two coordinates is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("POINT (1 2, 3 4)")


class TestNesting:
    """Parentheses must match the geometry's shape."""

    def test_linestring_too_deep(self):
        """LINESTRING coordinates sit at depth one."""
        with pytest.raises(MalformedNestingError):
            loads("LINESTRING ((1 2, 3 4))")

    def test_polygon_numbers_need_ring(self):
        """POLYGON numbers outside a ring are rejected."""
        with pytest.raises(MalformedNestingError):
            loads("POLYGON (1 2, 3 4, 5 6, 1 2)")

    def test_polygon_empty_ring(self):
        """A ring separator before any ring is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("POLYGON (, (0 0, 1 0, 1 1, 0 0))")

    def test_polygon_rings_need_comma(self):
        """Two rings without a ',' between them are not merged."""
        with pytest.raises(MalformedNestingError):
            loads("POLYGON ((0 0, 1 0, 1 1, 0 0) (5 5, 6 5, 6 6, 5 5))")

    def test_polygon_trailing_ring_comma(self):
        """A ring separator must be followed by a ring."""
        with pytest.raises(MalformedNestingError):
            loads("POLYGON ((0 0, 1 0, 1 1, 0 0), )")

    def test_polygon_empty_last_ring(self):
        """An empty '()' ring is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("POLYGON ((0 0, 1 0, 1 1, 0 0), ())")

    def test_multipolygon_member_rings_need_comma(self):
        """Member polygons apply the same ring rules."""
        with pytest.raises(MalformedNestingError):
            loads("MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0) (5 5, 6 5, 6 6, 5 5)))")

    def test_underflow(self):
        """More ')' than '(' is rejected, not silently ignored."""
        polygon = Polygon()
        feed(polygon, "((0 0, 1 0, 1 1, 0 0)")
        polygon.handle_token(Token(TokenKind.RIGHT_PAREN))
        assert polygon.finished
        with pytest.raises(MalformedNestingError):
            polygon.handle_token(Token(TokenKind.RIGHT_PAREN))

    def test_comma_before_paren(self):
        """A comma outside the body is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("LINESTRING , (1 2)")


class TestPolygon:
    """Ring separation."""

    RINGS = (
        "POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), "
        "(1 1, 2 1, 2 2, 1 1), "
        "(5 5, 6 5, 6 6, 5 5))"
    )

    def test_three_rings(self):
        """Middle rings collect in inner_boundaries, the last stays in coordinates."""
        polygon = loads(self.RINGS)
        assert len(polygon.outer_boundary) == 5
        assert polygon.inner_boundaries == [[(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 1.0)]]
        assert polygon.coordinates[0] == (5.0, 5.0)

    def test_rings_view(self):
        """rings, exterior and interiors list rings in source order."""
        polygon = loads(self.RINGS)
        assert len(polygon.rings) == 3
        assert polygon.exterior == polygon.outer_boundary
        assert [ring[0] for ring in polygon.interiors] == [(1.0, 1.0), (5.0, 5.0)]

    def test_single_ring_views(self):
        """Without holes the only ring is the exterior."""
        polygon = loads("POLYGON ((0 0, 1 0, 1 1, 0 0))")
        assert polygon.exterior == polygon.coordinates
        assert polygon.interiors == []

    def test_geojson(self):
        """GeoJSON coordinates list every ring, exterior first."""
        geometry = loads("POLYGON ((0 0, 1 0, 1 1, 0 0), (0.2 0.2, 0.4 0.2, 0.2 0.4, 0.2 0.2))").to_geojson()
        assert geometry["type"] == "Polygon"
        assert len(geometry["coordinates"]) == 2
        assert geometry["coordinates"][1][0] == [0.2, 0.2]


class TestMultiPoint:
    """Both MULTIPOINT spellings."""

    def test_bare_and_parenthesised_points_agree(self):
        """(1 2, 3 4) and ((1 2), (3 4)) give the same coordinates."""
        bare = loads("MULTIPOINT (10 40, 40 30, 20 20)")
        wrapped = loads("MULTIPOINT ((10 40), (40 30), (20 20))")
        assert isinstance(bare, MultiPoint)
        assert bare.coordinates == wrapped.coordinates
        assert len(bare.coordinates) == 3

    def test_geojson(self):
        """GeoJSON MultiPoint is a list of positions."""
        geometry = loads("MULTIPOINT Z ((1 2 3), (4 5 6))").to_geojson()
        assert geometry == {"type": "MultiPoint", "coordinates": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]}


class TestMultiLineString:
    """Parts are child LineStrings."""

    def test_parts(self):
        """Each parenthesised group becomes one LineString."""
        multi = loads("MULTILINESTRING ((10 10, 20 20, 10 40), (40 40, 30 30, 40 20, 30 10))")
        assert isinstance(multi, MultiLineString)
        assert [type(p) for p in multi.parts] == [LineString, LineString]
        assert [len(p.coordinates) for p in multi.parts] == [3, 4]

    def test_parts_inherit_tag(self):
        """Parts read tuples with the parent's arity."""
        multi = loads("MULTILINESTRING Z ((1 2 3, 4 5 6), (7 8 9, 1 2 3))")
        assert all(p.is_3d for p in multi.parts)
        assert multi.parts[1].coordinates[0] == (7.0, 8.0, 9.0)

    def test_missing_comma(self):
        """Parts must be comma separated."""
        with pytest.raises(MalformedNestingError):
            loads("MULTILINESTRING ((1 2, 3 4) (5 6, 7 8))")

    def test_trailing_comma(self):
        """A comma must be followed by another part."""
        with pytest.raises(MalformedNestingError):
            loads("MULTILINESTRING ((1 2, 3 4),)")

    def test_numbers_outside_parts(self):
        """Coordinates directly in the multi body are rejected."""
        with pytest.raises(MalformedNestingError):
            loads("MULTILINESTRING (1 2, 3 4)")


class TestMultiPolygon:
    """Parts are child Polygons with their own rings."""

    TEXT = (
        "MULTIPOLYGON (((40 40, 20 45, 45 30, 40 40)), "
        "((20 35, 10 30, 10 10, 30 5, 45 20, 20 35), (30 20, 20 15, 20 25, 30 20)))"
    )

    def test_parts(self):
        """Two polygons; the second keeps its hole."""
        multi = loads(self.TEXT)
        assert isinstance(multi, MultiPolygon)
        first, second = multi.parts
        assert isinstance(first, Polygon)
        assert first.outer_boundary is None
        assert len(first.coordinates) == 4
        assert len(second.outer_boundary) == 6
        assert len(second.coordinates) == 4

    def test_empty_member(self):
        """EMPTY may stand in for a member polygon."""
        multi = loads("MULTIPOLYGON (EMPTY, ((0 0, 1 0, 1 1, 0 0)))")
        assert multi.parts[0].is_empty
        assert len(multi.parts[1].coordinates) == 4

    def test_geojson(self):
        """GeoJSON MultiPolygon nests polygons, rings, positions."""
        geometry = loads(self.TEXT).to_geojson()
        assert geometry["type"] == "MultiPolygon"
        assert len(geometry["coordinates"]) == 2
        assert len(geometry["coordinates"][1]) == 2
        assert geometry["coordinates"][0][0][0] == [40.0, 40.0]


class TestGeometryCollection:
    """Members are built from nested keywords."""

    def test_members(self):
        """Each keyword in the body starts a member."""
        gc = loads("GEOMETRYCOLLECTION (POINT (4 6), LINESTRING (4 6, 7 10))")
        assert isinstance(gc, GeometryCollection)
        assert [type(g) for g in gc.geometries] == [Point, LineString]
        assert gc.geometries[1].coordinates == [(4.0, 6.0), (7.0, 10.0)]

    def test_nested_collection(self):
        """Collections may contain collections."""
        gc = loads(
            "GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (POINT (1 2), POINT EMPTY), "
            "POLYGON ((0 0, 1 0, 1 1, 0 0)))"
        )
        inner = gc.geometries[0]
        assert isinstance(inner, GeometryCollection)
        assert len(inner.geometries) == 2
        assert inner.geometries[1].is_empty
        assert isinstance(gc.geometries[1], Polygon)

    def test_members_inherit_tag(self):
        """Untagged members take the collection's tag; tagged ones keep theirs."""
        gc = loads("GEOMETRYCOLLECTION Z (POINT (1 2 3), POINT Z (4 5 6))")
        assert all(g.is_3d for g in gc.geometries)
        assert gc.geometries[0].coordinates == [(1.0, 2.0, 3.0)]

    def test_numbers_need_member(self):
        """Bare coordinates inside a collection are rejected."""
        with pytest.raises(MalformedNestingError):
            loads("GEOMETRYCOLLECTION (1 2)")

    def test_paren_needs_keyword(self):
        """A parenthesised group without a keyword is rejected."""
        with pytest.raises(MalformedNestingError):
            loads("GEOMETRYCOLLECTION ((1 2))")

    def test_geojson(self):
        """GeoJSON GeometryCollection lists member geometries."""
        geometry = loads("GEOMETRYCOLLECTION (POINT (4 6), CIRCULARSTRING (0 0, 1 1, 2 0))").to_geojson()
        assert geometry == {
            "type": "GeometryCollection",
            "geometries": [{"type": "Point", "coordinates": [4.0, 6.0]}],
        }
