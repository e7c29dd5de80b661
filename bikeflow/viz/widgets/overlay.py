# bikeflow/viz/widgets/overlay.py


def on_map_wrap(body):
    """
    <script> that runs `body` once the page has loaded, with `wrap` bound
    to the positioned container around the Leaflet map. Widgets append
    themselves to `wrap` so they float over the map.
    """
    return f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

{body}
}});
</script>
"""


def replace_in_wrap(element_id, build_js):
    """JS that drops any previous #element_id, then appends the one `build_js` creates as `el`."""
    return f"""
  const old = document.getElementById("{element_id}");
  if (old) old.remove();
  {build_js}
  el.id = "{element_id}";
  wrap.appendChild(el);
"""
