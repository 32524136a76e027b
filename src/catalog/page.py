"""Page shell: trigger buttons, the display region and the ambient audio hook."""

from __future__ import annotations

import html as html_lib
import json
from typing import Iterable, Optional

from src.catalog.audio import AudioTrack, audio_markup
from src.catalog.display import DisplayRegion
from src.catalog.registry import ActionBinding, all_bindings

CATALOG_ROUTE = "/api/v1/catalog"


def _buttons_html(bindings: Iterable[ActionBinding]) -> str:
    return "\n".join(
        f'      <button id="{b.trigger_id}" type="button">{html_lib.escape(b.category.label)}</button>'
        for b in bindings
    )


def _catalog_script(trigger_ids, region_id: str) -> str:
    # Responses that arrive after a newer click on the same trigger are ignored.
    return f"""\
    <script>
      "use strict";
      (function() {{
        const TRIGGERS = {json.dumps(list(trigger_ids))};
        const latest = {{}};

        window.addEventListener("load", () => {{
          TRIGGERS.forEach(id => {{
            latest[id] = 0;
            document.getElementById(id).addEventListener("click", () => loadCatalog(id));
          }});
        }});

        function errorMarkup(message) {{
          const p = document.createElement("p");
          p.className = "error";
          p.textContent = message;
          return p.outerHTML;
        }}

        async function loadCatalog(id) {{
          const seq = ++latest[id];
          let markup;
          try {{
            const response = await fetch("{CATALOG_ROUTE}/" + id);
            if (response.ok) {{
              markup = await response.text();
            }} else {{
              markup = errorMarkup("Error: " + (response.statusText || response.status));
            }}
          }} catch (error) {{
            markup = errorMarkup(error.message);
          }}
          if (seq === latest[id]) {{
            document.getElementById({json.dumps(region_id)}).innerHTML = markup;
          }}
        }}
      }})();
    </script>"""


def render_page(
    audio: AudioTrack,
    region: Optional[DisplayRegion] = None,
    title: str = "CS2 Item Catalog",
) -> str:
    region = region or DisplayRegion()
    bindings = all_bindings()
    return f"""\
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{html_lib.escape(title)}</title>
    <link rel="stylesheet" href="/static/style.css" />
  </head>
  <body>
    <header><h1>{html_lib.escape(title)}</h1></header>
    <nav>
{_buttons_html(bindings)}
    </nav>
    <main>
      {region.to_html()}
    </main>
{audio_markup(audio)}
{_catalog_script((b.trigger_id for b in bindings), region.element_id)}
  </body>
</html>
"""
