"""Layout graph and open-end derivation tests"""
import itertools

import pytest

from domino_api.domain.bone import Bone, Side
from domino_api.domain.errors import InvalidLayout, MalformedInput
from domino_api.domain.layout import LayoutGraph, OpenEnds, replay_open_ends


def chain(*pips):
    """Bones of a chain walking through the given pip values."""
    return [Bone(a, b) for a, b in zip(pips, pips[1:])]


class TestOpenEnds:
    def test_empty_table(self):
        assert LayoutGraph().open_ends() is None

    def test_single_bone(self):
        assert LayoutGraph.from_bones([Bone(5, 2)]).open_ends() == OpenEnds(2, 5)

    def test_single_double(self):
        assert LayoutGraph.from_bones([Bone(3, 3)]).open_ends() == OpenEnds(3, 3)

    def test_chain(self):
        graph = LayoutGraph.from_bones(chain(1, 4, 6, 0))
        assert graph.open_ends() == OpenEnds(0, 1)

    def test_doubles_do_not_change_ends(self):
        bones = chain(2, 4, 5) + [Bone(4, 4), Bone(5, 5)]
        assert LayoutGraph.from_bones(bones).open_ends() == OpenEnds(2, 5)

    def test_double_at_open_end(self):
        bones = [Bone(3, 3), Bone(3, 1)]
        assert LayoutGraph.from_bones(bones).open_ends() == OpenEnds(1, 3)

    def test_chain_revisiting_a_value(self):
        bones = [Bone(6, 2), Bone(2, 3), Bone(3, 4), Bone(4, 2)]
        # 2 is touched three times, 6 once
        assert LayoutGraph.from_bones(bones).open_ends() == OpenEnds(2, 6)

    def test_independent_of_order(self):
        bones = chain(0, 1, 2, 3, 4) + [Bone(2, 2)]
        expected = LayoutGraph.from_bones(bones).open_ends()
        for permutation in itertools.permutations(bones):
            assert LayoutGraph.from_bones(permutation).open_ends() == expected

    def test_odd_vertex_count_is_zero_or_two(self):
        graph = LayoutGraph.from_bones(chain(6, 5, 4, 3, 2, 1, 0) + [Bone(0, 0), Bone(6, 6)])
        odd = [v for v, count in enumerate(graph.incidence()) if count % 2]
        assert len(odd) in (0, 2)

    def test_incidence_counts_self_loop_twice(self):
        graph = LayoutGraph.from_bones([Bone(3, 3), Bone(3, 1)])
        assert graph.incidence().tolist() == [0, 1, 0, 3, 0, 0, 0]

    def test_more_than_two_odd_vertices(self):
        # a star around 1 cannot be a single chain
        bones = [Bone(1, 2), Bone(1, 3), Bone(1, 4)]
        with pytest.raises(InvalidLayout):
            LayoutGraph.from_bones(bones).open_ends()

    def test_disconnected(self):
        with pytest.raises(InvalidLayout):
            LayoutGraph.from_bones([Bone(1, 2), Bone(5, 5)]).open_ends()

    def test_closed_loop_is_ambiguous(self):
        with pytest.raises(InvalidLayout):
            LayoutGraph.from_bones(chain(1, 2, 3, 1)).open_ends()

    def test_duplicate_bone(self):
        with pytest.raises(MalformedInput):
            LayoutGraph.from_bones([Bone(1, 2), Bone(2, 1)])

    def test_contains(self):
        graph = LayoutGraph.from_bones([Bone(1, 2)])
        assert Bone(2, 1) in graph
        assert Bone(1, 3) not in graph


class TestReplay:
    def test_empty(self):
        assert replay_open_ends([]) is None

    def test_first_bone_sets_order(self):
        assert replay_open_ends([(Bone(5, 2), Side.LEFT)]) == OpenEnds(5, 2)

    def test_sides(self):
        plays = [
            (Bone(2, 5), Side.LEFT),
            (Bone(1, 2), Side.LEFT),
            (Bone(5, 6), Side.RIGHT),
        ]
        assert replay_open_ends(plays) == OpenEnds(1, 6)

    def test_falls_back_to_matching_side(self):
        plays = [(Bone(2, 5), Side.LEFT), (Bone(5, 6), Side.LEFT)]
        assert replay_open_ends(plays) == OpenEnds(2, 6)

    def test_side_decides_when_both_match(self):
        first = (Bone(2, 5), Side.LEFT)
        assert replay_open_ends([first, (Bone(5, 2), Side.LEFT)]) == OpenEnds(5, 5)
        assert replay_open_ends([first, (Bone(5, 2), Side.RIGHT)]) == OpenEnds(2, 2)

    def test_closed_loop(self):
        plays = [
            (Bone(1, 2), Side.LEFT),
            (Bone(2, 3), Side.RIGHT),
            (Bone(3, 1), Side.RIGHT),
        ]
        assert replay_open_ends(plays) == OpenEnds(1, 1)

    def test_unmatched_bone(self):
        with pytest.raises(InvalidLayout):
            replay_open_ends([(Bone(1, 2), Side.LEFT), (Bone(4, 5), Side.LEFT)])
