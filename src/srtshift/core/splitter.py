"""Divide subtitle text into two halves for dual-track output."""


def divide_text(text: str) -> tuple[str, str]:
    """Divide multi-line subtitle text into a left and right half.

    Args:
        text: Subtitle text, one or more newline-terminated lines

    Returns:
        Tuple of (left, right) text, each ending with a single newline

    Notes:
        The division is a fixed policy keyed on the number of physical lines:

        ===== ============== ==============
        lines left           right
        ===== ============== ==============
        2     l0             l0
        3     l0             l1
        4     l0             l1 + l2
        5     l0 + l1        l2 + l3
        6     l0 + l1 + l2   l3 + l4 + l5
        other l0             rest joined
        ===== ============== ==============

        Grouped lines are concatenated without a separator and lines past the
        groups are dropped, so the halves do not rejoin into the original.
    """
    lines = text.splitlines()

    count = len(lines)
    if count == 2:
        left, right = lines[0], lines[0]
    elif count == 3:
        left, right = lines[0], lines[1]
    elif count == 4:
        left, right = lines[0], lines[1] + lines[2]
    elif count == 5:
        left, right = lines[0] + lines[1], lines[2] + lines[3]
    elif count == 6:
        left = lines[0] + lines[1] + lines[2]
        right = lines[3] + lines[4] + lines[5]
    else:
        left = lines[0] if lines else ""
        right = "".join(lines[1:])

    return f"{left}\n", f"{right}\n"
