"""
Action registry: which trigger fetches which file and renders with which template.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Iterable, List

from src.catalog import cards
from src.catalog.display import DisplayRegion
from src.catalog.pipeline import FetchPipeline
from src.integrations.contracts.catalog import CatalogItem, FetchOutcome, UnknownTrigger

logger = logging.getLogger(__name__)


class Category(str, Enum):
    WEAPONS = "weapons"
    STICKERS = "stickers"
    COLLECTIONS = "collections"
    CRATES = "crates"
    KEYS = "keys"
    COLLECTIBLES = "collectibles"
    AGENTS = "agents"
    PATCHES = "patches"
    GRAFFITI = "graffiti"
    MUSIC_KITS = "music-kits"

    @property
    def trigger_id(self) -> str:
        return f"fetch-{self.value}"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


@dataclass(frozen=True)
class ActionBinding:
    category: Category
    endpoint: str
    template: cards.CardTemplate

    @property
    def trigger_id(self) -> str:
        return self.category.trigger_id

    def render(self, items: Iterable[CatalogItem], region: DisplayRegion) -> None:
        cards.render_items(items, self.template, region)


ACTION_REGISTRY: Dict[Category, ActionBinding] = {
    Category.WEAPONS: ActionBinding(Category.WEAPONS, "skins.json", cards.WEAPON),
    Category.STICKERS: ActionBinding(Category.STICKERS, "stickers.json", cards.STICKER),
    Category.COLLECTIONS: ActionBinding(Category.COLLECTIONS, "collections.json", cards.COLLECTION),
    Category.CRATES: ActionBinding(Category.CRATES, "crates.json", cards.CRATE),
    Category.KEYS: ActionBinding(Category.KEYS, "keys.json", cards.KEY),
    Category.COLLECTIBLES: ActionBinding(Category.COLLECTIBLES, "collectibles.json", cards.COLLECTIBLE),
    Category.AGENTS: ActionBinding(Category.AGENTS, "agents.json", cards.AGENT),
    Category.PATCHES: ActionBinding(Category.PATCHES, "patches.json", cards.PATCH),
    Category.GRAFFITI: ActionBinding(Category.GRAFFITI, "graffiti.json", cards.GRAFFITI),
    Category.MUSIC_KITS: ActionBinding(Category.MUSIC_KITS, "music_kits.json", cards.MUSIC_KIT),
}

_missing = set(Category) - set(ACTION_REGISTRY)
if _missing:
    raise RuntimeError(f"Categories without an action binding: {sorted(c.value for c in _missing)}")

_BY_TRIGGER: Dict[str, ActionBinding] = {b.trigger_id: b for b in ACTION_REGISTRY.values()}


def all_bindings() -> List[ActionBinding]:
    return list(ACTION_REGISTRY.values())


def binding_for_trigger(trigger_id: str) -> ActionBinding:
    try:
        return _BY_TRIGGER[trigger_id]
    except KeyError:
        raise UnknownTrigger(trigger_id) from None


TriggerHandler = Callable[[], Awaitable[FetchOutcome]]


def make_handler(binding: ActionBinding, pipeline: FetchPipeline, region: DisplayRegion) -> TriggerHandler:
    async def handler() -> FetchOutcome:
        return await pipeline.fetch_data(binding.endpoint, binding.render, region, key=binding.trigger_id)

    return handler


def bind_triggers(
    bind: Callable[[str, TriggerHandler], None],
    pipeline: FetchPipeline,
    region: DisplayRegion,
) -> Dict[str, TriggerHandler]:
    """Attach exactly one click handler per trigger id via ``bind``."""
    handlers: Dict[str, TriggerHandler] = {}
    for binding in ACTION_REGISTRY.values():
        handler = make_handler(binding, pipeline, region)
        bind(binding.trigger_id, handler)
        handlers[binding.trigger_id] = handler
    logger.info("Bound %d catalog triggers", len(handlers))
    return handlers
