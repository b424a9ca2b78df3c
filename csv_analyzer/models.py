"""Column statistics models."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ColumnType(str, Enum):
    """Inferred column types."""

    NUMERIC = "numeric"
    TEXT = "text"


class _BaseColumnStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name as it appears in the header")
    count: int = Field(..., ge=0, description="Total number of rows, nulls included")
    unique: int = Field(..., ge=0, description="Distinct non-null raw values")
    nulls: int = Field(..., ge=0, description="Rows whose value is absent or empty")

    @property
    def non_null(self) -> int:
        return self.count - self.nulls


class TextColumnStats(_BaseColumnStats):
    """Statistics for a column that is not predominantly numeric."""

    type: Literal["text"] = ColumnType.TEXT.value


class NumericColumnStats(_BaseColumnStats):
    """
    Statistics for a numeric column.

    The aggregates cover only the values that parsed as numbers; `unique`
    still counts raw strings, so "1" and "1.0" are two unique values.
    """

    type: Literal["numeric"] = ColumnType.NUMERIC.value
    mean: float
    min: float
    max: float
    median: float


ColumnStats = Annotated[
    Union[NumericColumnStats, TextColumnStats],
    Field(discriminator="type"),
]
