from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

# --- Column Types ---
class ColumnType(str, Enum):
    """Type lattice, strongest first: INTEGER -> FLOAT -> STRING."""
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

# --- Options ---
class SniffOptions(BaseModel):
    """
    Caller overrides for a single sniff call.
    Anything left as None is auto-detected, except quote_char: an explicit None
    (or "") there means the sample is unquoted.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    newline_str: Optional[str] = Field(None, alias="newlineStr", min_length=1, description="Line terminator of the sample.")
    delimiter: Optional[str] = Field(None, max_length=1, description="Field delimiter.")
    quote_char: Optional[str] = Field(None, alias="quoteChar", max_length=1, description="Quote character, empty for none.")
    has_header: Optional[bool] = Field(None, alias="hasHeader", description="Whether row 0 holds column labels.")

    @property
    def quote_char_given(self) -> bool:
        return "quote_char" in self.model_fields_set

# --- Intermediate Profiles ---
class TypeProfile(BaseModel):
    first: List[ColumnType] = Field(default_factory=list, description="Types of row 0 alone.")
    tail: List[ColumnType] = Field(default_factory=list, description="Types accumulated over rows 1..N.")
    all: List[ColumnType] = Field(default_factory=list, description="Tail types folded with row 0.")

class HeaderVote(BaseModel):
    has_header: bool
    vote: int
    types: List[ColumnType] = Field(default_factory=list)

# --- Result ---
class SniffResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    newline_str: str = Field(..., alias="newlineStr")
    delimiter: Optional[str] = Field(None, description="None means single-column rows.")
    quote_char: Optional[str] = Field(None, alias="quoteChar")
    has_header: bool = Field(..., alias="hasHeader")
    warnings: List[str] = Field(default_factory=list)
    types: List[ColumnType] = Field(default_factory=list)
    labels: Optional[List[str]] = Field(None, description="Row 0 when it is a header.")
    records: List[List[str]] = Field(default_factory=list, description="Parsed rows without the header.")
