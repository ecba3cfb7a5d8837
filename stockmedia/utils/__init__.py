def first_non_empty(*vals: str | None) -> str | None:
    for v in vals:
        if v and str(v).strip():
            return v
    return None
