from __future__ import annotations

from typing import Iterable, Mapping

from frontier.dialogue.builder import build_variables
from frontier.dialogue.schemas import NPC, DialogueTreeTemplate, GenerationContext
from frontier.dialogue.snippets import substitute_variables
from frontier.engine.conditions import evaluate
from frontier.models.state import GameState


def get_template(templates: Mapping[str, DialogueTreeTemplate], template_id: str) -> DialogueTreeTemplate | None:
    return templates.get(template_id)


def templates_for_role(templates: Iterable[DialogueTreeTemplate], role: str) -> list[DialogueTreeTemplate]:
    return [template for template in templates if not template.valid_roles or role in template.valid_roles]


def templates_for_faction(templates: Iterable[DialogueTreeTemplate], faction: str) -> list[DialogueTreeTemplate]:
    return [template for template in templates if not template.valid_factions or faction in template.valid_factions]


def templates_for_npc(templates: Iterable[DialogueTreeTemplate], npc: NPC) -> list[DialogueTreeTemplate]:
    return templates_for_faction(templates_for_role(templates, npc.role), npc.faction)


def templates_by_tag(templates: Iterable[DialogueTreeTemplate], tag: str) -> list[DialogueTreeTemplate]:
    return [template for template in templates if tag in template.tags]


def entry_conditions_hold(
    template: DialogueTreeTemplate,
    variables: Mapping[str, str],
    state: GameState,
) -> bool:
    for condition in template.entry_conditions:
        if condition.target is not None:
            condition = condition.model_copy(update={"target": substitute_variables(condition.target, variables)})
        if not evaluate(condition, state):
            return False
    return True


def eligible_templates(
    templates: Iterable[DialogueTreeTemplate],
    npc: NPC,
    context: GenerationContext,
    state: GameState,
) -> list[DialogueTreeTemplate]:
    variables = build_variables(npc, context)
    return [template for template in templates_for_npc(templates, npc) if entry_conditions_hold(template, variables, state)]
