from __future__ import annotations

import logging

from frontier.config import Settings, configure_logging
from frontier.content.loader import ContentTables, load_content
from frontier.dialogue.builder import build_dialogue_tree
from frontier.dialogue.entry import tree_integrity_errors
from frontier.dialogue.schemas import NPC, GenerationContext
from frontier.rng import SeededRandom

log = logging.getLogger(__name__)

SAMPLE_NPC = NPC(id="npc_sample", name="Sample", role="townsfolk", faction="town_council", location_id="town_square")


def check_dialogue_templates(tables: ContentTables, rng_seed: int) -> list[str]:
    rng = SeededRandom(rng_seed)
    errors: list[str] = []
    for template_id in tables.dialogue_templates:
        tree = build_dialogue_tree(
            template_id,
            SAMPLE_NPC,
            GenerationContext(),
            tables.dialogue_snippets,
            rng,
            templates=tables.dialogue_templates,
        )
        if tree is not None:
            errors.extend(tree_integrity_errors(tree))
    return errors


def main() -> int:
    settings = Settings()
    configure_logging(settings.dev_mode)
    log.info("content_check_start %s", settings.describe())
    tables = load_content(settings.content_dir)
    errors = check_dialogue_templates(tables, settings.rng_seed)
    for error in errors:
        log.warning("dialogue_integrity_error %s", error)
    log.info("content_ready errors=%s %s", len(errors), tables.counts())
    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
