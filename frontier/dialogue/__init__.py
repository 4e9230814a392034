from frontier.dialogue.builder import build_dialogue_tree, build_variables
from frontier.dialogue.entry import available_choices, entry_node, select_entry_point, tree_integrity_errors
from frontier.dialogue.schemas import (
    NPC,
    DialogueChoice,
    DialogueNode,
    DialogueSnippet,
    DialogueTree,
    DialogueTreeTemplate,
    EntryPoint,
    GenerationContext,
)
from frontier.dialogue.snippets import filter_snippets, substitute_variables, time_of_day
from frontier.dialogue.templates import eligible_templates, templates_for_npc

__all__ = [
    "NPC",
    "DialogueChoice",
    "DialogueNode",
    "DialogueSnippet",
    "DialogueTree",
    "DialogueTreeTemplate",
    "EntryPoint",
    "GenerationContext",
    "available_choices",
    "build_dialogue_tree",
    "build_variables",
    "eligible_templates",
    "entry_node",
    "filter_snippets",
    "select_entry_point",
    "substitute_variables",
    "templates_for_npc",
    "time_of_day",
    "tree_integrity_errors",
]
