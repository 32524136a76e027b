"""
Generate item cards for the display region.

One generic renderer driven by a per-category ``CardTemplate``: the template
says which optional fields a card shows and how they are labelled. Rendering is
a pure projection of the API records; missing fields become empty text.
"""

from __future__ import annotations

import html as html_lib
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from src.catalog.display import DisplayRegion
from src.integrations.contracts.catalog import CatalogItem


@dataclass(frozen=True)
class FieldProjection:
    """One ``<p>Label: value</p>`` line of a card."""
    label: str
    path: str                            # dotted path into the item, e.g. "rarity.name"
    color_path: Optional[str] = None     # when set, the value is wrapped in a colored span


@dataclass(frozen=True)
class CardTemplate:
    css_class: str
    image_width: int = 150
    fields: Tuple[FieldProjection, ...] = ()


RARITY = FieldProjection("Rarity", "rarity.name", color_path="rarity.color")


def lookup(item: Any, path: str) -> str:
    """Follow a dotted path through nested mappings; anything missing yields ''."""
    value = item
    for key in path.split("."):
        if not isinstance(value, Mapping):
            return ""
        value = value.get(key)
    if value is None or isinstance(value, (Mapping, list)):
        return ""
    return str(value)


def _esc(value: str) -> str:
    return html_lib.escape(value, quote=True)


def render_field(item: CatalogItem, projection: FieldProjection) -> str:
    value = _esc(lookup(item, projection.path))
    if projection.color_path is None:
        return f"<p>{projection.label}: {value}</p>"
    color = _esc(lookup(item, projection.color_path))
    return f'<p>{projection.label}: <span style="color: {color}">{value}</span></p>'


def render_card(item: CatalogItem, template: CardTemplate) -> str:
    name = _esc(lookup(item, "name"))
    image = _esc(lookup(item, "image"))
    lines = [f"<h2>{name}</h2>"]
    lines.extend(render_field(item, f) for f in template.fields)
    lines.append(f'<img src="{image}" alt="{name}" width="{template.image_width}">')
    body = "\n  ".join(lines)
    return f'<div class="{template.css_class}">\n  {body}\n</div>'


def render_items(items: Iterable[CatalogItem], template: CardTemplate, region: DisplayRegion) -> None:
    """Replace the region's children with one card per item, in input order."""
    cards: List[str] = [render_card(item, template) for item in items]
    region.replace(cards)


# ---------------------------------------------------------------------------
# Per-category templates
# ---------------------------------------------------------------------------

WEAPON = CardTemplate("weapon", image_width=300, fields=(FieldProjection("Category", "category.name"), RARITY))
STICKER = CardTemplate("sticker", fields=(RARITY,))
COLLECTION = CardTemplate("collection")
CRATE = CardTemplate("crate", fields=(FieldProjection("Type", "type"),))
KEY = CardTemplate("key")
COLLECTIBLE = CardTemplate("collectible", fields=(RARITY,))
AGENT = CardTemplate("agent", fields=(FieldProjection("Team", "team.name"),))
PATCH = CardTemplate("patch", fields=(RARITY,))
GRAFFITI = CardTemplate("graffiti", fields=(RARITY,))
MUSIC_KIT = CardTemplate("music-kit", fields=(RARITY,))
