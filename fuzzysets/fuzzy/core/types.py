from typing import Optional

Float = float

# tolerancje numeryczne dla porównań "prawie 0" / "prawie 1"
ZERO_TOL: Float = 1e-8
ONE_TOL: Float = 0.999999999


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


class MembershipOutOfRangeError(FuzzyError, ValueError):
    """Membership value outside [0, 1]."""

    def __init__(self, value: Optional[Float] = None, msg: Optional[str] = None):
        self.value = value
        if msg is None:
            msg = "Membership value cannot be beyond [0,1]"
            if value is not None:
                msg += f" (got {value!r})"
        super().__init__(msg)


class InvalidShapeError(FuzzyError, ValueError):
    """Shape parameters describe a degenerate or self-contradictory curve."""

    def __init__(self, shape_required: str = "", shape_found: str = "Unknown", msg: Optional[str] = None):
        self.shape_required = shape_required
        self.shape_found = shape_found
        if msg is None:
            msg = "Invalid shape for the given fuzzy set"
            if shape_required:
                msg += f": shape required {shape_required}, shape found {shape_found}"
        super().__init__(msg)


def out_of_range(membership: Float) -> bool:
    return not (0.0 <= membership <= 1.0)  # NaN też poza zakresem


def check_membership(membership: Float) -> Float:
    if out_of_range(membership):
        raise MembershipOutOfRangeError(membership)
    return float(membership)
