from html import escape
from typing import Iterable, NamedTuple, Tuple


class StatCard(NamedTuple):
    title: str
    value: str
    background_color: str


# Static placeholder metrics; there is no data source behind them.
STAT_CARDS: Tuple[StatCard, ...] = (
    StatCard("Steps Walked", "8,542", "#FFF9C4"),
    StatCard("Calories Burned", "562 kcal", "#FFCDD2"),
    StatCard("Mood", "Happy 😊", "#C8E6C9"),
    StatCard("Sleep Score", "7h 45m", "#D1C4E9"),
)

DASHBOARD_TITLE = "## Wellness Dashboard"

DASHBOARD_CSS = """
.stat-card {
    border-radius: 16px;
    box-shadow: 0 3px 6px rgba(0, 0, 0, 0.2);
    height: 100px;
    display: flex;
    flex-direction: column;
    align-items: center;
    justify-content: center;
    margin-bottom: 16px;
}
.stat-card .stat-title { font-size: 18px; font-weight: 500; color: #444444; }
.stat-card .stat-value { font-size: 22px; font-weight: 700; color: #000000; }
"""


def render_stat_card(card: StatCard) -> str:
    """Return the HTML block for a single metric card."""
    return (
        f'<div class="stat-card" style="background-color: {escape(card.background_color)};">'
        f'<div class="stat-title">{escape(card.title)}</div>'
        f'<div class="stat-value">{escape(card.value)}</div>'
        "</div>"
    )


def render_dashboard(cards: Iterable[StatCard] = STAT_CARDS) -> str:
    return "\n".join(render_stat_card(card) for card in cards)
