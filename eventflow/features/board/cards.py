# eventflow/features/board/cards.py
from html import escape
from typing import Callable, List, Optional, Sequence

from eventflow.features.events.schemas import EventPlan

COLLAPSED_LIMIT = 3

# (field, heading, css modifier)
SECTIONS = (
    ("todo_list", "To-Do List", "todo"),
    ("activities", "Fun Activities", "activities"),
    ("gift_ideas", "Best Gifts", "gifts"),
)

def default_delete_action(event_id: int) -> str:
    return f"/events/{event_id}/delete"

def default_toggle_href(event_id: int, expanded: bool) -> str:
    return "/" if expanded else f"/?expanded={event_id}"

def visible_items(items: Optional[Sequence[str]], expanded: bool) -> List[str]:
    items = list(items or [])
    return items if expanded else items[:COLLAPSED_LIMIT]

def _render_section(heading: str, css: str, items: List[str]) -> str:
    lis = "\n".join(f'        <li><span class="dot dot--{css}"></span>{escape(i)}</li>' for i in items)
    return (
        f'    <section class="plan-list plan-list--{css}">\n'
        f"      <h3>{escape(heading)}</h3>\n"
        f"      <ul>\n{lis}\n      </ul>\n"
        f"    </section>"
    )

def render_event_card(
    plan: EventPlan,
    *,
    expanded: bool = False,
    delete_action: Callable[[int], str] = default_delete_action,
    toggle_href: Callable[[int, bool], str] = default_toggle_href,
) -> str:
    """
    HTML fragment for one plan. Lists show COLLAPSED_LIMIT items unless expanded.
    Deleting is a POST to delete_action(plan.id); the card itself never touches the list.
    """
    chips = "\n".join(
        f'    <span class="chip">✨ {escape(t)}</span>' for t in plan.theme_suggestions
    )
    sections = "\n".join(
        _render_section(heading, css, visible_items(getattr(plan, field), expanded))
        for field, heading, css in SECTIONS
    )
    toggle_label = "Show Less" if expanded else "View Full Plan"

    return f"""<article class="event-card" id="event-{plan.id}" data-expanded="{str(expanded).lower()}">
  <header class="event-card__header">
    <div class="event-card__badge">🎉</div>
    <div>
      <h2>{escape(plan.eventType)}</h2>
      <div class="event-card__meta">
        <span class="who">{escape(plan.name)}</span>
        <span>{escape(plan.age)} Years Old</span>
        <span>{escape(plan.gender)}</span>
        <span class="created">{escape(plan.createdAt)}</span>
      </div>
    </div>
    <form method="post" action="{escape(delete_action(plan.id))}">
      <button type="submit" class="delete" title="Delete Event">Delete</button>
    </form>
  </header>
  <div class="chips">
{chips}
  </div>
  <div class="plan-grid">
{sections}
  </div>
  <a class="toggle" href="{escape(toggle_href(plan.id, expanded))}">{toggle_label}</a>
</article>"""
