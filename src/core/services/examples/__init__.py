"""Example catalog, in S-O-L-I-D order."""

from core.services.examples import dip, isp, lsp, ocp, srp
from core.services.examples.base import Example, ExampleContext, ExampleScript

ALL_EXAMPLES: tuple[Example, ...] = (
    *srp.EXAMPLES,
    *ocp.EXAMPLES,
    *lsp.EXAMPLES,
    *isp.EXAMPLES,
    *dip.EXAMPLES,
)

__all__ = ["ALL_EXAMPLES", "Example", "ExampleContext", "ExampleScript"]
