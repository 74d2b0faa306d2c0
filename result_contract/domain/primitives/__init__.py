"""Primitives shared by every contract.

- leniency: process-wide switch deciding how inconclusive value checks are
  treated
"""

from result_contract.domain.primitives import leniency

__all__: list[str] = ["leniency"]
