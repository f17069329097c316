"""Director - named build recipes over an exchangeable builder."""
from typing import Optional

from patternkit.domain.builder.builder import Builder
from patternkit.infrastructure.logging import get_logger


class Director:
    """
    Issues canonical step sequences against the registered builder.

    The director holds no product state. Running a recipe with no builder
    registered does nothing.
    """

    def __init__(self, builder: Optional[Builder] = None):
        self.logger = get_logger(__name__)
        self._builder = builder

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    def update(self, builder: Builder) -> None:
        """Register the builder subsequent recipes run against."""
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        """Part A only."""
        if self._builder is None:
            self.logger.debug("No builder registered, skipping recipe", recipe="minimal_viable")
            return
        self._builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        """Parts A, B and C, in that order."""
        if self._builder is None:
            self.logger.debug("No builder registered, skipping recipe", recipe="full_featured")
            return
        self._builder.produce_part_a()
        self._builder.produce_part_b()
        self._builder.produce_part_c()
