# tests/test_cards.py
from eventflow.features.board.cards import COLLAPSED_LIMIT, render_event_card, visible_items

def test_visible_items_caps_when_collapsed():
    items = ["a", "b", "c", "d", "e"]
    assert visible_items(items, expanded=False) == ["a", "b", "c"]
    assert visible_items(items, expanded=True) == items
    assert visible_items(None, expanded=False) == []

def test_collapsed_card_shows_three_per_list(make_plan):
    html = render_event_card(make_plan(9))
    assert "Send invites" in html and "Book venue" in html
    assert "Buy decorations" not in html      # 4th to-do
    assert "Piñata" not in html               # 4th activity
    assert "Headphones" not in html           # 4th gift
    assert "View Full Plan" in html
    assert 'data-expanded="false"' in html

def test_expanded_card_shows_everything(make_plan):
    html = render_event_card(make_plan(9), expanded=True)
    for item in ("Buy decorations", "Plan playlist", "Piñata", "Headphones"):
        assert item in html
    assert "Show Less" in html

def test_header_and_theme_chips(make_plan):
    html = render_event_card(make_plan(9))
    assert "<h2>Graduation</h2>" in html
    assert "30 Years Old" in html
    assert html.count('class="chip"') == 3
    for heading in ("To-Do List", "Fun Activities", "Best Gifts"):
        assert heading in html

def test_absent_lists_render_empty(make_plan):
    plan = make_plan(9, theme_suggestions=[], activities=None, todo_list=[], gift_ideas=[])
    html = render_event_card(plan)
    assert 'class="chip"' not in html
    assert "<li" not in html

def test_delete_action_receives_id(make_plan):
    seen = []

    def delete_action(event_id):
        seen.append(event_id)
        return f"/custom/{event_id}"

    html = render_event_card(make_plan(77), delete_action=delete_action)
    assert seen == [77]
    assert 'action="/custom/77"' in html

def test_text_is_escaped(make_plan):
    html = render_event_card(make_plan(9, name="<script>x</script>", gift_ideas=["A & B"]))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "A &amp; B" in html

def test_limit_constant():
    assert COLLAPSED_LIMIT == 3
