"""Built-in pattern rule tables for the four semantic dimensions.

Declaration order is priority: the first label whose patterns match a
normalized name wins.  Keep the order when editing; moving a label up or
down changes how ambiguous names resolve.
"""

from __future__ import annotations

from dataclasses import dataclass

from asset_classifier.domain.entities import StateType
from asset_classifier.domain.exceptions import RuleTableError
from asset_classifier.domain.value_objects import RuleTable

# ── Raw tables ──────────────────────────────────────────────────────────────

DEVICE_PATTERNS: list[tuple[str, list[str]]] = [
    ("desktop", [r"desktop", r"pc", r"web", r"1440", r"1920", r"\b(lg|xl)\b"]),
    ("tablet", [r"tablet", r"ipad", r"768", r"1024", r"\bmd\b"]),
    ("mobile", [r"mobile", r"phone", r"375", r"414", r"\b(sm|xs)\b"]),
]

MODULE_PATTERNS: list[tuple[str, list[str]]] = [
    ("user-management", [r"user", r"profile", r"account", r"member", r"登入", r"用戶"]),
    ("dashboard", [r"dashboard", r"admin", r"overview", r"summary", r"儀表板", r"總覽"]),
    ("commerce", [r"shop", r"cart", r"product", r"order", r"payment", r"商品", r"購物"]),
    ("auth", [r"login", r"register", r"signup", r"auth", r"登入", r"註冊"]),
    ("content", [r"article", r"blog", r"news", r"content", r"文章", r"內容"]),
]

PAGE_PATTERNS: list[tuple[str, list[str]]] = [
    ("list", [r"list", r"index", r"grid", r"catalog", r"列表", r"清單"]),
    ("detail", [r"detail", r"view", r"show", r"single", r"詳情", r"詳細"]),
    ("form", [r"form", r"edit", r"create", r"add", r"表單", r"編輯"]),
    ("landing", [r"landing", r"home", r"intro", r"welcome", r"首頁", r"歡迎"]),
]

STATE_PATTERNS: list[tuple[str, list[str]]] = [
    ("hover", [r"hover", r"懸停"]),
    ("active", [r"active", r"selected", r"激活", r"選中"]),
    ("loading", [r"loading", r"spinner", r"載入", r"加載"]),
    ("error", [r"error", r"fail", r"錯誤", r"失敗"]),
    ("success", [r"success", r"done", r"complete", r"成功", r"完成"]),
]

# ── Device size heuristic ───────────────────────────────────────────────────

# (minimum width, label), checked top-down.
DEVICE_SIZE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (1200, "desktop"),
    (768, "tablet"),
    (320, "mobile"),
)


@dataclass(frozen=True, slots=True)
class DimensionRules:
    """The four rule tables one classifier instance owns."""

    device: RuleTable
    module: RuleTable
    page: RuleTable
    state: RuleTable


def default_rules(state_fallback: str = StateType.DEFAULT.value) -> DimensionRules:
    """Compile the built-in tables.

    The state table falls back to ``default`` so an asset without a state
    keyword is treated as its resting state; pass ``"unknown"`` for the
    strict reading.
    """
    try:
        StateType(state_fallback)
    except ValueError as exc:
        raise RuleTableError(f"Invalid state fallback: '{state_fallback}'.") from exc

    return DimensionRules(
        device=RuleTable.from_patterns(DEVICE_PATTERNS),
        module=RuleTable.from_patterns(MODULE_PATTERNS),
        page=RuleTable.from_patterns(PAGE_PATTERNS),
        state=RuleTable.from_patterns(STATE_PATTERNS, fallback=state_fallback),
    )
