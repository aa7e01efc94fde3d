# Primary keys are INTEGER columns: int4 on PostgreSQL.
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def parse_id(value) -> int:
    """Parse a client-supplied row id. Raises ValueError outside the column's range."""
    parsed = int(str(value).strip())
    if not MIN_ID <= parsed <= MAX_ID:
        raise ValueError(f"Id out of range: {parsed}")
    return parsed
