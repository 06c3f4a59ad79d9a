"""
Copilot preference learning from message feedback.
"""

from datetime import datetime
from typing import Any, Dict, Optional


def learn_from_feedback(
    preferences: Optional[Dict[str, Any]],
    is_positive: bool,
    context: Optional[Dict[str, Any]],
    now: datetime,
) -> Dict[str, Any]:
    """
    Return updated copilot preferences.

    Positive feedback records the niche (de-duplicated, in first-seen order)
    and the preferred style, and stamps the interaction time. Negative
    feedback adds the style to ``avoid_styles``.
    """
    prefs = dict(preferences or {})
    context = context or {}
    # Only plain strings are learned; the context is free-form client JSON
    niche = context.get("niche")
    niche = niche.strip() if isinstance(niche, str) else None
    style = context.get("style")
    style = style.strip() if isinstance(style, str) else None

    if is_positive:
        if niche:
            niches = [n for n in prefs.get("favorite_niches") or [] if isinstance(n, str)] + [niche]
            prefs["favorite_niches"] = list(dict.fromkeys(niches))
        if style:
            prefs["preferred_style"] = style
        prefs["last_positive_interaction"] = now.isoformat()
    elif style:
        prefs["avoid_styles"] = list(prefs.get("avoid_styles") or []) + [style]

    return prefs
