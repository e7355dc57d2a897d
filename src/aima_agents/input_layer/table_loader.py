"""TableLoader to build table-driven agent tables out of tabular data.

Writing a percept-sequence table by hand gets unwieldy fast, so tables can be kept in a DataFrame
or a file and loaded here. Each row holds one percept sequence and the action it maps to.

load_table call paths:
1. File path input -> _load_from_file -> _validate_data -> _build_table
2. DataFrame input -> _validate_data -> _build_table
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

import numpy as np
import pandas as pd

from aima_agents.agent_layer.agent_interface import NO_OP
from aima_agents.agent_layer.agent_program import freeze_percept
from aima_agents.log import logger


@dataclass
class TableLoaderParameters:
    sequence_column: str = "percepts"
    action_column: str = "action"
    separator: str = "|"
    """Splits string cells into percepts, e.g. ``"A|B"`` -> ``("A", "B")``."""

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")


class TableLoader:
    """
    Turns a DataFrame or table file into a ``{percept sequence: action}`` mapping.

    Sequence cells may hold lists, tuples, numpy arrays, or separator-joined strings. String cells
    yield string percepts, with whitespace around each percept stripped. The loaded frame is kept
    on ``data`` for inspection.
    """

    _DATAFRAME_READERS: ClassVar[dict[str, Callable[[str], pd.DataFrame]]] = {
        ".csv": pd.read_csv,
        ".xls": pd.read_excel,
        ".xlsx": pd.read_excel,
        ".json": pd.read_json,
        ".parquet": pd.read_parquet,
    }

    def __init__(self, parameters: TableLoaderParameters | None = None) -> None:
        self._parameters = parameters if parameters is not None else TableLoaderParameters()
        self._data: pd.DataFrame = pd.DataFrame()
        self._sequences: pd.Series = pd.Series(dtype=object)

    @property
    def parameters(self) -> TableLoaderParameters:
        return self._parameters

    @property
    def data(self) -> pd.DataFrame:
        return self._data

    def load_table(self, source: Any) -> dict[tuple[Any, ...], Any]:
        """
        Load, validate and convert a tabular source into a lookup table.

        Args:
            source: A pandas DataFrame, or a path (str) to a csv/xls/xlsx/json/parquet file.

        Returns:
            dict: Mapping from percept-sequence tuples to actions, in row order.

        Raises:
            FileNotFoundError: If a string path is supplied but does not exist.
            TypeError: When the source is neither a DataFrame nor a path.
            ValueError: If the frame is empty, misses columns, has null cells, empty sequences or
                duplicate sequences.
        """

        if isinstance(source, os.PathLike):
            source = os.fspath(source)

        if isinstance(source, str):
            if not os.path.exists(source):
                raise FileNotFoundError(f"No file found at {source}")
            frame = self._load_from_file(source)
        elif isinstance(source, pd.DataFrame):
            frame = source.copy()
        else:
            raise TypeError(
                "Unsupported table source. Supported types: DataFrame or a path to "
                f"{sorted(self._DATAFRAME_READERS)}, got {type(source).__name__}"
            )

        self._data = frame
        self._validate_data()
        table = self._build_table()
        logger.info(f"Loaded lookup table with {len(table)} percept sequence(s)")
        return table

    def _load_from_file(self, filepath: str) -> pd.DataFrame:
        """Load a table file with pandas based on file extension.

        Raises:
            ValueError: If the file type is unsupported.
        """

        try:
            logger.info(f"Loading table from {filepath}")

            file_extension = os.path.splitext(filepath)[1].lower()
            if file_extension in self._DATAFRAME_READERS:
                return self._DATAFRAME_READERS[file_extension](filepath)
            raise ValueError(f"Unsupported file type: {file_extension}")

        except Exception as e:
            logger.error(f"Error loading table {filepath}: {e}")
            raise

    def _split_sequence(self, cell: Any) -> tuple[Any, ...]:
        if isinstance(cell, str):
            tokens = [token.strip() for token in cell.split(self._parameters.separator)]
            if not all(tokens):
                logger.warning(f"Dropping empty percepts in sequence {cell!r}")
            return tuple(token for token in tokens if token)
        if isinstance(cell, np.ndarray):
            return tuple(freeze_percept(item) for item in cell.tolist())
        if isinstance(cell, Sequence):
            return tuple(freeze_percept(item) for item in cell)
        # a lone scalar is a sequence of one percept
        return (freeze_percept(cell),)

    def _validate_data(self) -> bool:
        """
        Check that the loaded frame can be turned into a table.

        Returns:
            bool: True when the frame passes all checks.

        Raises:
            ValueError: When any check fails.
        """

        logger.debug("validating table...")
        sequence_column = self._parameters.sequence_column
        action_column = self._parameters.action_column

        if self._data.empty:
            raise ValueError("DataFrame is empty")

        missing = [col for col in (sequence_column, action_column) if col not in self._data.columns]
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

        null_rows = self._data.index[
            self._data[[sequence_column, action_column]].isna().any(axis=1)
        ].tolist()
        if null_rows:
            raise ValueError(f"Rows with missing percepts or actions: {null_rows}")

        sequences = self._data[sequence_column].map(self._split_sequence)
        self._sequences = sequences

        empty_rows = self._data.index[sequences.map(len) == 0].tolist()
        if empty_rows:
            raise ValueError(f"Rows with empty percept sequences: {empty_rows}")

        duplicated = sequences[sequences.duplicated()].tolist()
        if duplicated:
            raise ValueError(f"Duplicate percept sequences: {duplicated}")

        return True

    def _build_table(self) -> dict[tuple[Any, ...], Any]:
        actions = self._data[self._parameters.action_column]
        # "NoOp" cells stand for the built-in no-op action
        actions = actions.map(
            lambda action: NO_OP if isinstance(action, str) and action == str(NO_OP) else action
        )
        return dict(zip(self._sequences.tolist(), actions.tolist()))
