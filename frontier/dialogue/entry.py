from __future__ import annotations

from frontier.dialogue.schemas import DialogueChoice, DialogueNode, DialogueTree, EntryPoint
from frontier.engine.conditions import conditions_hold
from frontier.engine.selector import entry_point_rank, select_best
from frontier.models.state import GameState


def select_entry_point(tree: DialogueTree, state: GameState) -> EntryPoint | None:
    return select_best(tree.entry_points, state, entry_point_rank)


def entry_node(tree: DialogueTree, state: GameState) -> DialogueNode | None:
    entry = select_entry_point(tree, state)
    if entry is not None:
        node = tree.node(entry.node_id)
        if node is not None:
            return node
    return tree.nodes[0] if tree.nodes else None


def available_choices(node: DialogueNode, state: GameState) -> list[DialogueChoice]:
    return [choice for choice in node.choices if conditions_hold(choice.conditions, state)]


def tree_integrity_errors(tree: DialogueTree) -> list[str]:
    errors: list[str] = []
    ids = [node.id for node in tree.nodes]
    known = set(ids)
    if len(known) != len(ids):
        errors.append(f"{tree.id}: duplicate node ids")
    for entry in tree.entry_points:
        if entry.node_id not in known:
            errors.append(f"{tree.id}: entry point targets missing node {entry.node_id}")
    for node in tree.nodes:
        for choice in node.choices:
            if choice.next_node_id is not None and choice.next_node_id not in known:
                errors.append(f"{node.id}: choice '{choice.text}' targets missing node {choice.next_node_id}")
    return errors
