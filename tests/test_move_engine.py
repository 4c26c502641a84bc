"""Tests for drag-and-drop moves across section boundaries."""

import pytest

pytestmark = pytest.mark.unit

from orderomatic.ordering import (
    MoveDecision,
    apply_move,
    build_tree,
    linearize,
    move_widget,
    resolve_move,
)


class TestNoOpMoves:
    """Moves that leave the arrangement as it is."""

    @pytest.mark.parametrize(
        "source,destination",
        [(0, 0), (3, 3), (-1, 2), (2, -1), (0, 5), (5, 0), (99, 1)],
    )
    def test_returns_none(self, basic_items, source, destination):
        assert move_widget(build_tree(basic_items), source, destination) is None

    def test_dragging_end_node(self, basic_items):
        assert move_widget(build_tree(basic_items), 4, 0) is None

    def test_section_without_room_after_itself(self, basic_items):
        """S dropped on its own member but nothing follows the section."""
        assert move_widget(build_tree(basic_items), 1, 3) is None


class TestMovingPlainWidgetsDown:
    """Plain widgets moved to a later drag index."""

    def test_onto_section_member(self, basic_items, helpers):
        """A dropped on B joins S and lands on B's slot.

        Forward moves shift the destination by the source's child count, so a
        plain widget takes the destination index itself.
        """
        result = move_widget(build_tree(basic_items), 0, 2)

        assert helpers.ids(result) == ["S", "B", "A", "C"]
        widgets = helpers.by_id(result)
        assert widgets["A"].section_id == "S"
        assert widgets["S"].child_ids == ["B", "A", "C"]
        helpers.assert_consistent(result)

    def test_onto_section_header(self, basic_items, helpers):
        """Dropping on the header makes the widget the first member."""
        result = move_widget(build_tree(basic_items), 0, 1)

        assert helpers.ids(result) == ["S", "A", "B", "C"]
        assert helpers.by_id(result)["S"].child_ids == ["A", "B", "C"]
        assert build_tree(result).get("A").label == "1.1"

    def test_onto_end_node_leaves_section(self, basic_items, helpers):
        """B dropped on the end of its own section ends up right after it."""
        result = move_widget(build_tree(basic_items), 2, 4)

        assert helpers.ids(result) == ["A", "S", "C", "B"]
        widgets = helpers.by_id(result)
        assert widgets["B"].section_id == ""
        assert widgets["S"].child_ids == ["C"]

    def test_onto_end_node_from_outside(self, basic_items, helpers):
        result = move_widget(build_tree(basic_items), 0, 4)

        assert helpers.ids(result) == ["S", "B", "C", "A"]
        assert helpers.by_id(result)["A"].section_id == ""

    def test_within_section(self, basic_items, helpers):
        result = move_widget(build_tree(basic_items), 2, 3)

        assert helpers.ids(result) == ["A", "S", "C", "B"]
        assert helpers.by_id(result)["S"].child_ids == ["C", "B"]

    def test_onto_top_level_widget_keeps_section(self, trailing_items, helpers):
        """Only headers, members and end nodes change membership."""
        nodes = linearize(build_tree(trailing_items))
        assert resolve_move(nodes, 2, 5) == MoveDecision(destination_index=5, section_id=None)

        result = move_widget(build_tree(trailing_items), 2, 5)
        assert helpers.ids(result) == ["A", "S", "C", "D", "B"]
        assert helpers.by_id(result)["B"].section_id == "S"
        helpers.assert_consistent(result)

    def test_into_another_section_header(self, two_section_items, helpers):
        """X leaves S1 by being dropped on the S2 header."""
        result = move_widget(build_tree(two_section_items), 1, 3)

        assert helpers.ids(result) == ["S1", "S2", "X", "Y", "Z"]
        widgets = helpers.by_id(result)
        assert widgets["S1"].child_ids == []
        assert widgets["S2"].child_ids == ["X", "Y"]


class TestMovingPlainWidgetsUp:
    """Plain widgets moved to an earlier drag index."""

    def test_out_of_section_onto_top_level(self, basic_items, helpers):
        result = move_widget(build_tree(basic_items), 2, 0)

        assert helpers.ids(result) == ["B", "A", "S", "C"]
        assert helpers.by_id(result)["B"].section_id == ""
        assert helpers.by_id(result)["S"].child_ids == ["C"]

    def test_onto_section_header_lands_before_section(self, basic_items, helpers):
        result = move_widget(build_tree(basic_items), 3, 1)

        assert helpers.ids(result) == ["A", "C", "S", "B"]
        assert helpers.by_id(result)["C"].section_id == ""

    def test_onto_member_joins_section(self, two_section_items, helpers):
        result = move_widget(build_tree(two_section_items), 6, 4)

        assert helpers.ids(result) == ["S1", "X", "S2", "Z", "Y"]
        assert helpers.by_id(result)["S2"].child_ids == ["Z", "Y"]

    def test_onto_end_node_joins_as_last_member(self, two_section_items, helpers):
        result = move_widget(build_tree(two_section_items), 6, 2)

        assert helpers.ids(result) == ["S1", "X", "Z", "S2", "Y"]
        assert helpers.by_id(result)["S1"].child_ids == ["X", "Z"]


class TestMovingSections:
    """Sections always travel with their members."""

    def test_down_past_top_level_widget(self, trailing_items, helpers):
        result = move_widget(build_tree(trailing_items), 1, 5)

        assert helpers.ids(result) == ["A", "D", "S", "B", "C"]
        widgets = helpers.by_id(result)
        assert widgets["B"].section_id == "S"
        assert widgets["C"].section_id == "S"
        helpers.assert_consistent(result)

    @pytest.mark.parametrize("destination", [2, 3, 4])
    def test_into_own_body_is_redirected_past_it(self, trailing_items, helpers, destination):
        """Dropping S on its own members or end node moves it after its block."""
        nodes = linearize(build_tree(trailing_items))
        assert resolve_move(nodes, 1, destination).destination_index == 5

        result = move_widget(build_tree(trailing_items), 1, destination)
        assert helpers.ids(result) == ["A", "D", "S", "B", "C"]

    def test_up_onto_top_level_widget(self, basic_items, helpers):
        result = move_widget(build_tree(basic_items), 1, 0)

        assert helpers.ids(result) == ["S", "B", "C", "A"]
        assert helpers.by_id(result)["S"].child_ids == ["B", "C"]

    def test_down_into_other_section_lands_after_it(self, two_section_items, helpers):
        nodes = linearize(build_tree(two_section_items))
        assert resolve_move(nodes, 0, 4) == MoveDecision(destination_index=5, section_id=None)

        result = move_widget(build_tree(two_section_items), 0, 4)
        assert helpers.ids(result) == ["S2", "Y", "S1", "X", "Z"]
        widgets = helpers.by_id(result)
        assert widgets["X"].section_id == "S1"
        assert widgets["Y"].section_id == "S2"
        helpers.assert_consistent(result)

    def test_up_into_other_section_lands_before_it(self, two_section_items, helpers):
        nodes = linearize(build_tree(two_section_items))
        assert resolve_move(nodes, 3, 1) == MoveDecision(destination_index=0, section_id=None)

        result = move_widget(build_tree(two_section_items), 3, 1)
        assert helpers.ids(result) == ["S2", "Y", "S1", "X", "Z"]

    def test_rebuilt_tree_keeps_sections_flat(self, two_section_items):
        tree = build_tree(move_widget(build_tree(two_section_items), 0, 4))
        assert [n.label for n in tree.top_level()] == ["1", "2", "3"]
        assert [tree.at(i).id for i in range(tree.length)] == [
            "S2", "Y", "end-S2", "S1", "X", "end-S1", "Z",
        ]


class TestMoveMechanics:
    """Tests for linearize / apply_move."""

    def test_linearize_matches_drag_indices(self, two_section_items):
        tree = build_tree(two_section_items)
        assert [n.drag_index for n in linearize(tree)] == list(range(tree.length))

    def test_apply_move_copies_reparented_source(self, basic_items):
        tree = build_tree(basic_items)
        nodes = linearize(tree)
        moved = apply_move(nodes, 0, MoveDecision(destination_index=2, section_id="S"))

        assert [n.id for n in moved] == ["S", "B", "A", "C", "end-S"]
        assert moved[2].section_id == "S"
        assert nodes[0].section_id == ""
        assert tree.get("A").section_id == ""

    def test_move_leaves_tree_and_widgets_untouched(self, basic_items):
        before = [w.model_dump() for w in basic_items]
        tree = build_tree(basic_items)
        move_widget(tree, 0, 2)

        assert [w.model_dump() for w in basic_items] == before
        assert [tree.at(i).id for i in range(tree.length)] == ["A", "S", "B", "C", "end-S"]
        assert tree.get("A").section_id == ""
