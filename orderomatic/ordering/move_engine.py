"""Drag-and-drop moves on the addressable widget tree.

A move is described only by two positions in the flat drag index space. The
engine works on a linear copy of the tree and decides, from the nodes found
at those positions, where the dragged node really lands and whether it joins
or leaves a section:

* A section always travels with its children and never lands inside a
  section body (its own or another one).
* A plain widget dropped on a section header becomes the first member of
  that section.
* A plain widget dropped on a section's end node leaves the section and is
  placed right after it.
"""

import logging
from typing import Sequence

from orderomatic.ordering.rebuilder import rebuild_widgets
from orderomatic.ordering.types import (
    MoveDecision,
    SectionEndNode,
    WidgetItem,
    WidgetNode,
    WidgetTree,
)

logger = logging.getLogger(__name__)

Node = WidgetNode | SectionEndNode


def linearize(tree: WidgetTree) -> list[Node]:
    """Flatten the tree in drag index order: each top-level node, then its children."""
    nodes: list[Node] = []
    for root in tree.top_level():
        nodes.append(root)
        nodes.extend(tree.children_of(root))
    return nodes


def resolve_move(
    nodes: Sequence[Node], source_index: int, destination_index: int
) -> MoveDecision | None:
    """
    Decide where a dragged node lands and which section it ends up in.

    Args:
        nodes: Linearized tree (see ``linearize``)
        source_index: Position of the dragged node
        destination_index: Position it was dropped on

    Returns:
        The effective destination and section change, or None when the drag
        changes nothing
    """
    length = len(nodes)
    if not (0 <= source_index < length and 0 <= destination_index < length):
        logger.debug("Move %s -> %s out of bounds (length %s)", source_index, destination_index, length)
        return None
    if source_index == destination_index:
        return None

    source = nodes[source_index]
    if isinstance(source, SectionEndNode):
        logger.debug("Ignoring drag of end node %s", source.id)
        return None

    destination = nodes[destination_index]
    headers = {node.id: position for position, node in enumerate(nodes) if node.is_section}
    section_id: str | None = None

    if source_index < destination_index:
        if source.is_section and destination.section_id:
            if destination.section_id == source.id:
                # Dropped inside its own body: land past its last child
                destination_index = source_index + len(source.children) + 1
            else:
                # Dropped inside another section: land right after that section
                owner = headers[destination.section_id]
                destination_index = owner + len(nodes[owner].children)
            if destination_index >= length:
                logger.debug("Section %s has nowhere to go after retargeting", source.id)
                return None
            logger.debug("Retargeted section %s to %s", source.id, destination_index)
            destination = nodes[destination_index]

        if not source.is_section:
            if destination.is_section:
                following = destination_index + 1
                section_id = nodes[following].section_id if following < length else ""
            elif destination.section_id:
                if isinstance(destination, SectionEndNode):
                    section_id = ""
                else:
                    section_id = destination.section_id
    else:
        if source.is_section and destination.section_id:
            destination_index = headers[destination.section_id]
            logger.debug("Retargeted section %s to header %s", source.id, destination_index)
            destination = nodes[destination_index]

        if not source.is_section:
            section_id = destination.section_id

    return MoveDecision(destination_index=destination_index, section_id=section_id)


def apply_move(nodes: Sequence[Node], source_index: int, decision: MoveDecision) -> list[Node]:
    """
    Cut the dragged node (and its children) out and reinsert it.

    The input sequence and its nodes are left untouched; a re-parented source
    is replaced by a copy carrying its new section.
    """
    working = list(nodes)
    source = working[source_index]
    block_length = 1 + len(source.children)

    if decision.section_id is not None and decision.section_id != source.section_id:
        source = source.model_copy(update={"section_id": decision.section_id})

    block = [source, *working[source_index + 1 : source_index + block_length]]
    del working[source_index : source_index + block_length]

    destination_index = decision.destination_index
    if destination_index > source_index:
        destination_index -= len(source.children)
    working[destination_index:destination_index] = block
    return working


def move_widget(tree: WidgetTree, source_index: int, destination_index: int) -> list[WidgetItem] | None:
    """
    Move the node at ``source_index`` to ``destination_index``.

    Args:
        tree: Tree built from the current widget list
        source_index: Drag index of the dragged node
        destination_index: Drag index it was dropped on

    Returns:
        The complete reordered widget list, or None if nothing changes
    """
    nodes = linearize(tree)
    decision = resolve_move(nodes, source_index, destination_index)
    if decision is None:
        return None
    return rebuild_widgets(apply_move(nodes, source_index, decision))
