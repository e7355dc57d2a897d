"""Table source interface contract"""

from typing import Any, Protocol, runtime_checkable

import pandas as pd


@runtime_checkable
class TableSourceInterface(Protocol):
    """Interface for loaders that build table-driven lookup tables."""

    @property
    def data(self) -> pd.DataFrame:
        """Return the validated DataFrame the most recent table was built from."""

        ...

    def load_table(self, source: Any) -> dict[tuple[Any, ...], Any]:
        """Build a mapping from percept sequences to actions out of a tabular source."""
        ...
