# eventflow/features/board/page.py
from __future__ import annotations

from html import escape
from typing import Optional, Sequence

from eventflow.features.events.schemas import EventPlan
from eventflow.features.plan.schemas import GENDERS
from .cards import render_event_card
from .controller import PlanFormController

CSS = r"""
body { margin: 0; font-family: system-ui, sans-serif; background: #f8fafc; color: #0f172a; }
main { max-width: 72rem; margin: 0 auto; padding: 2rem 1rem; }
.top { display: flex; justify-content: space-between; align-items: center; margin-bottom: 3rem; }
.top h1 { font-size: 2.5rem; margin: 0; color: #7c3aed; }
.top p { color: #64748b; margin: .5rem 0 0; }
button, .toggle { cursor: pointer; }
.primary { background: #6d28d9; color: #fff; border: 0; border-radius: 999px; padding: .75rem 1.5rem; font-weight: 600; }
.empty { text-align: center; padding: 5rem 1rem; border: 1px dashed #cbd5e1; border-radius: 1.5rem; }
.cards { display: grid; gap: 2rem; }
.event-card { background: #fff; border-radius: 1rem; padding: 1.5rem 2rem; box-shadow: 0 10px 25px rgba(15,23,42,.08); }
.event-card__header { display: flex; gap: 1rem; align-items: flex-start; }
.event-card__header > div:nth-child(2) { flex: 1; }
.event-card__badge { font-size: 2rem; }
.event-card__meta { display: flex; gap: .75rem; color: #64748b; }
.delete { background: none; border: 0; color: #94a3b8; }
.chips { display: flex; flex-wrap: wrap; gap: .5rem; margin: 1rem 0 2rem; }
.chip { padding: .25rem .75rem; border-radius: 999px; background: #eef2ff; color: #4338ca; font-size: .875rem; }
.plan-grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1.5rem; }
.plan-list { background: #f8fafc; border-radius: .75rem; padding: 1.25rem; }
.plan-list ul { list-style: none; padding: 0; margin: 0; }
.plan-list li { display: flex; gap: .5rem; color: #475569; font-size: .875rem; margin-bottom: .75rem; }
.dot { margin-top: .4rem; min-width: 6px; height: 6px; border-radius: 50%; }
.dot--todo { background: #34d399; } .dot--activities { background: #fb923c; } .dot--gifts { background: #f472b6; }
.toggle { display: block; text-align: center; margin-top: 1.5rem; padding-top: .5rem; border-top: 1px solid #f1f5f9; color: #94a3b8; text-decoration: none; }
.backdrop { position: fixed; inset: 0; background: rgba(15,23,42,.6); display: flex; align-items: center; justify-content: center; }
.modal { background: #fff; border-radius: 1rem; width: 100%; max-width: 28rem; overflow: hidden; }
.modal__head { background: #6d28d9; color: #fff; padding: 1.5rem; display: flex; justify-content: space-between; }
.modal__head p { margin: .25rem 0 0; font-size: .875rem; }
.modal__body { padding: 1.5rem; display: grid; gap: 1rem; }
.modal label { display: block; font-size: .875rem; margin-bottom: .25rem; }
.modal input, .modal select { width: 100%; box-sizing: border-box; padding: .5rem 1rem; border: 1px solid #e2e8f0; border-radius: .5rem; }
.row { display: flex; gap: 1rem; } .row > div { flex: 1; }
.error { background: #fef2f2; color: #dc2626; padding: .75rem; border-radius: .5rem; font-size: .875rem; }
.submit { background: #c026d3; color: #fff; border: 0; border-radius: .75rem; padding: .75rem; font-weight: 700; }
.submit:disabled { opacity: .7; cursor: not-allowed; }
"""

def render_modal(ctl: PlanFormController) -> str:
    form = ctl.form
    error = f'<div class="error" role="alert">{escape(ctl.error)}</div>' if ctl.error else ""
    options = "\n".join(
        f'<option value="{escape(g)}"{" selected" if g == form.gender else ""}>{escape(g)}</option>'
        for g in GENDERS
    )
    disabled = " disabled" if ctl.loading else ""
    label = "Consulting AI..." if ctl.loading else "✨ Generate Magic Plan"

    return f"""<div class="backdrop">
  <div class="modal" role="dialog" aria-labelledby="modal-title">
    <div class="modal__head">
      <div>
        <h2 id="modal-title">Plan an Event</h2>
        <p>Tell us a little bit, we'll do the rest.</p>
      </div>
      <form method="post" action="/modal/close"><button type="submit" class="close" title="Close">×</button></form>
    </div>
    <form class="modal__body" method="post" action="/plan">
      {error}
      <div>
        <label for="eventType">Event Name / Occasion</label>
        <input id="eventType" type="text" name="eventType" placeholder="e.g. Birthday, Anniversary, Graduation" value="{escape(form.eventType)}">
      </div>
      <div>
        <label for="name">Who is it for?</label>
        <input id="name" type="text" name="name" placeholder="Person's Name" value="{escape(form.name)}">
      </div>
      <div class="row">
        <div>
          <label for="age">Age</label>
          <input id="age" type="number" name="age" placeholder="25" value="{escape(form.age)}">
        </div>
        <div>
          <label for="gender">Gender</label>
          <select id="gender" name="gender">
{options}
          </select>
        </div>
      </div>
      <button type="submit" class="submit"{disabled}>{label}</button>
    </form>
  </div>
</div>"""

def render_board(events: Sequence[EventPlan], ctl: PlanFormController, *, expanded_id: Optional[int] = None) -> str:
    if events:
        body = '<div class="cards">\n' + "\n".join(
            render_event_card(e, expanded=(e.id == expanded_id)) for e in events
        ) + "\n</div>"
    else:
        body = """<div class="empty">
  <h3>No events planned yet</h3>
  <p>Click the button above to let AI plan your first celebration!</p>
</div>"""
    modal = render_modal(ctl) if ctl.modal_open else ""

    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>EventFlow AI</title>
<style>{CSS}</style>
</head>
<body>
<main>
  <header class="top">
    <div>
      <h1>EventFlow AI</h1>
      <p>Smart planning for unforgettable moments.</p>
    </div>
    <form method="post" action="/modal/open"><button type="submit" class="primary">+ Create New Event</button></form>
  </header>
{body}
</main>
{modal}
</body>
</html>"""
