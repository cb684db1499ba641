NANOMETRES_PER_METRE = 1e9


def nm_to_m(nanometres: float) -> float:
    """Convert nanometres to metres."""
    return nanometres / NANOMETRES_PER_METRE


def format_time(seconds: float) -> str:
    """Format a duration with the largest unit that keeps it readable."""
    if seconds < 0.001:
        return f"{seconds * 1e6:.2f} µs"
    if seconds < 1:
        return f"{seconds * 1000:.2f} ms"
    if seconds < 60:
        return f"{seconds:.2f} s"
    if seconds < 3600:
        return f"{seconds / 60:.2f} min"
    return f"{seconds / 3600:.2f} hr"


def format_factor(factor: float) -> str:
    """Format a dimensionless ratio, e.g. ``2.00x``."""
    return f"{factor:.2f}x"


def format_micrometres(nanometres: float) -> str:
    """Format a size given in nm as micrometres with one decimal, e.g. ``10.0 µm``."""
    return f"{nanometres / 1000:.1f} µm"
