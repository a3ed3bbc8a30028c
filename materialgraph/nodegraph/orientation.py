"""Link orientation: which endpoint of a link is the input and which the output."""

from __future__ import annotations

from typing import NamedTuple, Optional

from materialgraph.nodegraph.port import PortDirection, VisualPort


class OrientedLink(NamedTuple):
    input: VisualPort
    output: VisualPort


def resolve_orientation(
    a: Optional[VisualPort],
    b: Optional[VisualPort],
) -> Optional[OrientedLink]:
    """
    Sort two link endpoints into (input, output).

    Returns None when the pair is not one input and one output, or when
    either endpoint is missing. The result does not depend on argument order.
    """
    if a is None or b is None:
        return None
    if a.direction is PortDirection.INPUT and b.direction is PortDirection.OUTPUT:
        return OrientedLink(input=a, output=b)
    if a.direction is PortDirection.OUTPUT and b.direction is PortDirection.INPUT:
        return OrientedLink(input=b, output=a)
    return None
