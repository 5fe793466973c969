"""
Tests for FolderCluster geometry and forces.
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from foldergraph_core.config import ClusterConfig
from foldergraph_core.domain.models import GraphNode, Point, ORIGIN, PinNode, UnpinNode
from foldergraph_core.services.cluster import FolderCluster


def make_cluster(channel, positions, config=None):
    members = [GraphNode(f"f/{i}.md", x, y) for i, (x, y) in enumerate(positions)]
    cluster = FolderCluster("f", channel, config, members)
    cluster.update()
    return cluster


class TestClusterGeometry:
    """Test hull, center and radius."""

    def test_three_member_scenario(self, channel):
        cluster = make_cluster(channel, [(0, 0), (10, 0), (0, 10)])

        assert set(cluster.hull) == {Point(0, 0), Point(10, 0), Point(0, 10)}
        assert cluster.center == Point(5, 5)
        assert cluster.radius == pytest.approx(math.hypot(5, 5) + 30)

    def test_single_member_radius_is_padding(self, channel):
        cluster = make_cluster(channel, [(42, -7)])

        assert cluster.hull == [Point(42, -7)]
        assert cluster.center == Point(42, -7)
        assert cluster.radius == 30

    def test_two_members_hull_is_members(self, channel):
        cluster = make_cluster(channel, [(0, 0), (20, 0)])

        assert cluster.hull == [Point(0, 0), Point(20, 0)]
        assert cluster.center == Point(10, 0)
        assert cluster.radius == 40

    def test_empty_cluster_is_degenerate(self, channel):
        cluster = make_cluster(channel, [])

        assert cluster.hull == []
        assert cluster.center == ORIGIN
        assert cluster.radius == 0

    def test_vertical_column_inside_own_puddle(self, channel):
        cluster = make_cluster(channel, [(0, 0), (0, 5), (0, 10)])

        assert cluster.center == Point(0, 5)
        assert cluster.radius == 35
        for member in cluster.members:
            assert member.position.distance_to(cluster.center) <= cluster.radius

    def test_custom_padding(self, channel):
        cluster = make_cluster(channel, [(0, 0)], ClusterConfig(padding=5))
        assert cluster.radius == 5

    def test_update_follows_member_moves(self, channel):
        cluster = make_cluster(channel, [(0, 0), (10, 0)])
        cluster.members[1].x = 30
        cluster.update()

        assert cluster.center == Point(15, 0)
        assert cluster.radius == 45

    def test_radius_never_negative(self, channel):
        for positions in ([], [(0, 0)], [(1, 1), (1, 1)], [(0, 0), (3, 4), (-2, 8)]):
            assert make_cluster(channel, positions).radius >= 0

    def test_enclosure_circle_only_by_default(self, channel):
        cluster = make_cluster(channel, [(0, 0), (10, 0), (0, 10)])
        enclosure = cluster.enclosure()

        assert enclosure.folder == "f"
        assert enclosure.center == cluster.center
        assert enclosure.radius == cluster.radius
        assert enclosure.polygon is None

    def test_enclosure_polygon_is_sorted(self, channel):
        cluster = make_cluster(channel, [(10, 10), (0, 0), (0, 10), (10, 0), (5, 5)])
        polygon = cluster.enclosure(with_polygon=True).polygon

        assert polygon == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

    def test_enclosure_polygon_needs_three_points(self, channel):
        cluster = make_cluster(channel, [(0, 0), (10, 0)], ClusterConfig(show_polygon=True))
        assert cluster.enclosure().polygon is None


class TestClusterForce:
    """Test the repulsion applied to non-member nodes."""

    # One member at the origin: radius 30, repel radius 130, force K 20

    def test_force_at_half_repel_radius(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 65, 0)

        assert cluster.force_at(65) == pytest.approx(20 * 0.75)
        assert cluster.apply_force(node) is True
        assert node.x == pytest.approx(80)
        assert node.y == pytest.approx(0)

    def test_force_zero_at_repel_radius(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        assert cluster.force_at(130) == 0
        assert cluster.force_at(131) == 0

    def test_push_uses_force_at(self, channel, monkeypatch):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 0, 40)
        monkeypatch.setattr(cluster, "force_at", lambda dist: 7.0)

        assert cluster.apply_force(node) is True
        assert node.x == pytest.approx(0)
        assert node.y == pytest.approx(47)

    def test_push_is_radial(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 30, 40)  # len 50
        cluster.apply_force(node)

        k = 20 * (1 - (50 / 130) ** 2)
        assert node.x == pytest.approx(30 + k * 0.6)
        assert node.y == pytest.approx(40 + k * 0.8)

    def test_pin_message_sent(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 65, 0)
        cluster.apply_force(node)

        assert channel.commands == [PinNode("other.md", node.x, node.y)]
        assert channel.redraws == 1
        assert cluster.forced_nodes == {"other.md"}

    def test_far_node_untouched(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 200, 0)

        assert cluster.apply_force(node) is False
        assert (node.x, node.y) == (200, 0)
        assert channel.commands == []
        assert channel.redraws == 0

    def test_member_not_pushed(self, channel):
        cluster = make_cluster(channel, [(0, 0), (10, 0)])
        member = cluster.members[0]

        assert cluster.apply_force(member) is False
        assert (member.x, member.y) == (0, 0)
        assert channel.commands == []

    def test_membership_is_by_identity(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        lookalike = GraphNode("f/0.md", 0, 10)

        assert cluster.apply_force(lookalike) is True

    def test_released_exactly_once(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 65, 0)
        cluster.apply_force(node)

        node.x = 500
        cluster.apply_force(node)
        cluster.apply_force(node)
        cluster.apply_force(node)

        assert channel.unpins == [UnpinNode("other.md")]
        assert cluster.forced_nodes == set()
        assert channel.redraws == 2

    def test_node_at_center_does_not_divide_by_zero(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        node = GraphNode("other.md", 0, 0)

        assert cluster.apply_force(node) is True
        # Falls back to pushing along +x with full strength
        assert node.x == pytest.approx(20)
        assert node.y == 0

    def test_zero_repel_radius_is_out_of_range(self, channel):
        cluster = make_cluster(channel, [(0, 0)], ClusterConfig(padding=0, margin_min=0))
        node = GraphNode("other.md", 0, 0)

        assert cluster.repel_radius == 0
        assert cluster.apply_force(node) is False
        assert channel.commands == []

    def test_release_all(self, channel):
        cluster = make_cluster(channel, [(0, 0)])
        for i in range(3):
            cluster.apply_force(GraphNode(f"n{i}", 10 + i, 0))

        assert cluster.release_all() == 3
        assert {c.node_id for c in channel.unpins} == {"n0", "n1", "n2"}
        assert cluster.forced_nodes == set()
        assert cluster.release_all() == 0


class TestClusterConfig:
    """Test configuration handling."""

    def test_defaults(self):
        config = ClusterConfig()
        assert (config.padding, config.margin_min, config.hull_force_k) == (30, 100, 20)

    def test_from_dict_ignores_unknown_keys(self):
        config = ClusterConfig.from_dict({"padding": 10, "showFolders": True})
        assert config.padding == 10
        assert config.to_dict()["margin_min"] == 100

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError, match="padding"):
            ClusterConfig(padding=-1)
        with pytest.raises(ValueError, match="margin_min"):
            ClusterConfig(margin_min=-1)
