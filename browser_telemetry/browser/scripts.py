"""JavaScript injected into the page for click capture and DOM context lookups."""

REPORT_CLICK_BINDING = "__reportClick"

# Installed as an init script and re-run on every load. The guard keeps a
# second run from registering a second listener.
CLICK_CAPTURE_SCRIPT = """
(() => {
  if (window.__browserTelemetryClickCapture) return;
  window.__browserTelemetryClickCapture = true;

  function buildSelector(el) {
    if (el.id) return '#' + el.id;

    const parts = [];
    while (el && el.nodeType === Node.ELEMENT_NODE) {
      let selector = el.tagName.toLowerCase();
      if (el.id) {
        selector = '#' + el.id;
        parts.unshift(selector);
        break;
      } else if (el.className && typeof el.className === 'string') {
        const classes = el.className.trim().split(/\\s+/).filter(c => c).slice(0, 2);
        if (classes.length) selector += '.' + classes.join('.');
      }

      const parent = el.parentElement;
      if (parent) {
        const siblings = Array.from(parent.children).filter(c => c.tagName === el.tagName);
        if (siblings.length > 1) {
          selector += ':nth-of-type(' + (siblings.indexOf(el) + 1) + ')';
        }
      }

      parts.unshift(selector);
      el = parent;
      if (parts.length > 4) break;
    }
    return parts.join(' > ');
  }

  function getAttributes(el) {
    const attrs = {};
    for (const attr of el.attributes) {
      if (attr.name !== 'class' && attr.name !== 'style') {
        attrs[attr.name] = attr.value.slice(0, 200);
      }
    }
    return attrs;
  }

  function firstInputValue(root) {
    const input = root.querySelector('input, textarea');
    return input ? (input.value || '').slice(0, 500) : undefined;
  }

  function getInputValue(el) {
    const tag = el.tagName.toLowerCase();
    if (tag === 'input' || tag === 'textarea') {
      return (el.value || '').slice(0, 500);
    }
    if (tag === 'select') {
      return el.options[el.selectedIndex]?.text || '';
    }
    if (el.isContentEditable) {
      return (el.textContent || '').trim().slice(0, 500);
    }
    let value = firstInputValue(el);
    if (value !== undefined) return value;
    if (el.shadowRoot) {
      value = firstInputValue(el.shadowRoot);
      if (value !== undefined) return value;
    }
    for (const child of el.querySelectorAll('*')) {
      if (child.shadowRoot) {
        value = firstInputValue(child.shadowRoot);
        if (value !== undefined) return value;
      }
    }
    return undefined;
  }

  document.addEventListener('click', (e) => {
    const el = e.target;
    if (!el || el.nodeType !== Node.ELEMENT_NODE) return;

    const clickData = {
      selector: buildSelector(el),
      tagName: el.tagName.toLowerCase(),
      attributes: getAttributes(el),
      textContent: (el.textContent || '').trim().slice(0, 200)
    };

    const inputValue = getInputValue(el);
    if (inputValue !== undefined) {
      clickData.inputValue = inputValue;
    }

    window.__reportClick(clickData);
  }, true);
})();
"""


def parent_chain_script(depth: int) -> str:
    """Function source returning up to ``depth`` ancestors, stopping at <body>."""
    return f"""
    (selector) => {{
      const el = document.querySelector(selector);
      if (!el) throw new Error('Element not found: ' + selector);

      const parents = [];
      let current = el.parentElement;
      let d = {int(depth)};

      while (current && d > 0 && current !== document.body) {{
        parents.push({{
          tagName: current.tagName.toLowerCase(),
          id: current.id || null,
          className: current.className || null,
        }});
        current = current.parentElement;
        d--;
      }}
      return parents;
    }}
    """


def children_script(depth: int) -> str:
    """Function source returning the child tree ``depth`` levels deep."""
    return f"""
    (selector) => {{
      const el = document.querySelector(selector);
      if (!el) throw new Error('Element not found: ' + selector);

      function getChildren(node, d) {{
        if (d <= 0) return null;
        const children = [];
        for (const child of node.children) {{
          children.push({{
            tagName: child.tagName.toLowerCase(),
            id: child.id || null,
            className: child.className || null,
            textContent: (child.textContent || '').trim().slice(0, 100),
            children: getChildren(child, d - 1)
          }});
        }}
        return children.length > 0 ? children : null;
      }}

      return getChildren(el, {int(depth)});
    }}
    """
