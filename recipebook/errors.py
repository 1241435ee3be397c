"""
Exceptions raised by the recipe book core.
"""

from typing import List


class ValidationError(ValueError):
    """
    Raised when an Add form draft cannot be turned into a recipe.

    Attributes:
        problems: Human-readable descriptions of every failed check
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))
