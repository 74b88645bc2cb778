from typing import Any, Tuple

from kanaedge.api.schemas import DEFAULT_MODE, DEFAULT_TARGET, MODES, TARGETS


def parse_model(raw_model: Any = None, raw_mode: Any = None) -> Tuple[str, str]:
    """
    Resolve the (to, mode) pair for a chat request.

    `model` may carry both values as "<to>-<mode>", e.g. "katakana-spaced",
    or just the target with `mode` given separately. Unknown values fall back
    to hiragana/normal field by field; this never raises.
    """
    if isinstance(raw_model, str) and "-" in raw_model:
        parts = raw_model.split("-")
        if len(parts) == 2 and parts[0] in TARGETS and parts[1] in MODES:
            return parts[0], parts[1]
        # Extra parts after the second hyphen are ignored
        to = parts[0] if parts[0] in TARGETS else DEFAULT_TARGET
        mode = parts[1] if len(parts) > 1 and parts[1] in MODES else DEFAULT_MODE
        return to, mode

    to = raw_model if isinstance(raw_model, str) and raw_model in TARGETS else DEFAULT_TARGET
    mode = raw_mode if isinstance(raw_mode, str) and raw_mode in MODES else DEFAULT_MODE
    return to, mode
