"""
Value types passed between the command and formatting layers:
bound query parameters (a tagged variant), query descriptors and column specs.
"""
from datetime import date, datetime
from typing import Annotated, Any, Iterable, Literal, Optional, Union

# --- Third Party Libraries ---
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from db_errors import UnsupportedParameterError


# --- Query Parameters (tagged variant) ---
class TextParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: StrictStr

    def bind_value(self):
        return self.value


class IntegerParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"
    # SQLite INTEGER is a signed 64-bit value
    value: Annotated[StrictInt, Field(ge=-2**63, le=2**63 - 1)]

    def bind_value(self):
        return self.value


class FloatParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["float"] = "float"
    value: StrictFloat

    def bind_value(self):
        return self.value


class DateParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["date"] = "date"
    value: date

    def bind_value(self):
        # SQLite has no DATE type, dates are stored and compared as ISO text
        return self.value.isoformat()


class NullParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["null"] = "null"

    def bind_value(self):
        return None


QueryParam = Annotated[
    Union[TextParam, IntegerParam, FloatParam, DateParam, NullParam],
    Field(discriminator="kind"),
]


def to_param(value: Any):
    """Maps a runtime Python value onto exactly one QueryParam kind."""
    if isinstance(value, (TextParam, IntegerParam, FloatParam, DateParam, NullParam)):
        return value
    if value is None:
        return NullParam()
    # bool is a subclass of int, reject it before the int check
    if isinstance(value, bool):
        raise UnsupportedParameterError(f"Unsupported parameter type: {type(value).__name__}")
    if isinstance(value, str):
        return TextParam(value=value)
    if isinstance(value, int):
        try:
            return IntegerParam(value=value)
        except ValidationError as e:
            raise UnsupportedParameterError(f"Integer out of SQLite range: {value}") from e
    if isinstance(value, float):
        return FloatParam(value=value)
    # datetime is a subclass of date, but binding it would silently drop the time part
    if isinstance(value, date) and not isinstance(value, datetime):
        return DateParam(value=value)
    raise UnsupportedParameterError(f"Unsupported parameter type: {type(value).__name__}")


# --- Query Descriptor ---
class QueryDescriptor(BaseModel):
    """Literal SQL text plus positional (qmark) parameters. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    sql: str
    params: tuple[QueryParam, ...] = ()

    @classmethod
    def build(cls, sql: str, params: Optional[Iterable[Any]] = None) -> "QueryDescriptor":
        """Converts raw values with to_param; raises UnsupportedParameterError on the first bad one."""
        converted = []
        for position, value in enumerate(params or (), start=1):
            try:
                converted.append(to_param(value))
            except UnsupportedParameterError as e:
                raise UnsupportedParameterError(f"Parameter {position}: {e}", sql=sql) from e
        return cls(sql=sql, params=tuple(converted))

    def bind_values(self) -> tuple:
        return tuple(param.bind_value() for param in self.params)


# --- Fixed Schema Columns ---
class ColumnSpec(BaseModel):
    """One column of a fixed layout: printed label, source column name and value kind."""
    model_config = ConfigDict(frozen=True)

    label: str
    name: str
    kind: Literal["text", "integer", "float", "date"] = "text"

    def coerce(self, value):
        if value is None:
            return None
        if self.kind == "integer":
            return int(value)
        if self.kind == "float":
            return float(value)
        if self.kind == "date":
            if isinstance(value, date):
                return value
            text = str(value)
            try:
                return date.fromisoformat(text)
            except ValueError:
                # Timestamp text such as '1986-02-21 00:00:00'
                return datetime.fromisoformat(text).date()
        return str(value)


GAMES_COLUMNS = (
    ColumnSpec(label="Game ID", name="GameID", kind="integer"),
    ColumnSpec(label="Game Name", name="GameName"),
    ColumnSpec(label="Release Date", name="ReleaseDate", kind="date"),
    ColumnSpec(label="Genre", name="Genre"),
)
