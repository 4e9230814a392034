from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from frontier.models.conditions import Condition

TimeBucket = Literal["morning", "afternoon", "evening", "night"]

SnippetCategory = Literal[
    "greeting",
    "farewell",
    "small_talk",
    "rumor",
    "quest_offer",
    "quest_update",
    "quest_complete",
    "shop_welcome",
    "shop_browse",
    "shop_buy",
    "shop_sell",
    "shop_farewell",
    "threat",
    "insult",
    "compliment",
    "bribe",
    "thanks",
    "question",
    "agreement",
    "refusal",
]


class NPC(BaseModel):
    id: str
    name: str
    title: str | None = None
    role: str
    faction: str
    location_id: str
    personality: dict[str, float] = Field(default_factory=dict)


class GenerationContext(BaseModel):
    game_hour: int = Field(default=12, ge=0, le=23)
    region_id: str | None = None
    variables: dict[str, str] = Field(default_factory=dict)


class DialogueSnippet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: SnippetCategory
    text_templates: list[str] = Field(min_length=1)
    personality_min: dict[str, float] = Field(default_factory=dict)
    personality_max: dict[str, float] = Field(default_factory=dict)
    valid_roles: list[str] = Field(default_factory=list)
    valid_factions: list[str] = Field(default_factory=list)
    valid_time_of_day: list[TimeBucket] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class ChoicePattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    text_template: str
    # template-local role name, never a node id
    next_role: str | None = None
    tags: list[str] = Field(default_factory=list)


class NodePattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    snippet_categories: list[str] = Field(default_factory=list)
    choice_patterns: list[ChoicePattern] = Field(default_factory=list)


class DialogueTreeTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    entry_conditions: list[Condition] = Field(default_factory=list)
    node_patterns: list[NodePattern] = Field(min_length=1)
    valid_roles: list[str] = Field(default_factory=list)
    valid_factions: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class DialogueChoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    next_node_id: str | None = None
    conditions: list[Condition] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class DialogueNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str = Field(min_length=1)
    choices: list[DialogueChoice] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class EntryPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_id: str
    conditions: list[Condition] = Field(default_factory=list)
    priority: int = 0


class DialogueTree(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    nodes: list[DialogueNode]
    entry_points: list[EntryPoint] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def node(self, node_id: str) -> DialogueNode | None:
        return next((node for node in self.nodes if node.id == node_id), None)
