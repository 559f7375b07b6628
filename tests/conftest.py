#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siscale import Base, Constraint, UNCONSTRAINED, UNIT_AND_ABOVE, UNIT_AND_BELOW, UNIT_ONLY

CONSTRAINTS = {
    "none": UNCONSTRAINED,
    "unit_only": UNIT_ONLY,
    "unit_and_above": UNIT_AND_ABOVE,
    "unit_and_below": UNIT_AND_BELOW,
    "custom_m_unit_k": Constraint.custom(["m", "", "k"]),
    "custom_k_G": Constraint.custom(["k", "G"]),
}


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(params=list(Base), ids=lambda b: b.name)
def base(request) -> Base:
    """Each supported base."""
    return request.param


@pytest.fixture(params=list(CONSTRAINTS.values()), ids=list(CONSTRAINTS))
def constraint(request) -> Constraint:
    """Each builtin constraint plus sample custom ones."""
    return request.param
