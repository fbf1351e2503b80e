import math
from shopbudget.client.screen import ViewState
from shopbudget.client.records import DayView, ShopCard


def yen(n) -> str:
    """Whole-yen display value, e.g. 1234.6 -> '¥1,235'"""
    v = math.floor(float(n or 0) + 0.5)
    sign = "-" if v < 0 else ""
    return f"{sign}¥{abs(v):,}"


def _render_shop(shop: ShopCard) -> list:
    lines = [f"== {shop.name} (#{shop.id})"]
    if not shop.items:
        lines.append("   (no items)")
    for it in shop.items:
        mark = "[x]" if it.is_bought else "[ ]"
        lines.append(f"   {mark} {it.name:<20} planned {yen(it.planned_price):>10}  actual {yen(it.actual_price):>10}  (#{it.id})")
    return lines


def render_view(view: DayView) -> str:
    lines = [f"Date: {view.date}", ""]
    for shop in view.shops:
        lines.extend(_render_shop(shop))
        lines.append("")
    if not view.shops:
        lines.extend(["No shops for this day.", ""])

    remaining = yen(view.remaining)
    if view.over_budget:
        remaining += "  (over budget)"

    lines.extend([
        f"Day planned:   {yen(view.totals.day_planned)}",
        f"Day actual:    {yen(view.totals.day_actual)}",
        f"Month actual:  {yen(view.totals.month_actual)}",
        f"Budget {view.budget.ym}: {yen(view.budget.amount)}",
        f"Remaining:     {remaining}",
    ])
    return "\n".join(lines)


def render_day(state: ViewState) -> str:
    if state.error is not None:
        return f"API error: {state.error}"
    if state.view is None:
        return "Loading..."
    return render_view(state.view)
