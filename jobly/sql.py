'''
jobly.sql
Turns update/search intents into parameterized SQL fragments.
Values never end up in the fragment text, only in `values`.
'''

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from jobly.dialects import DEFAULT_DIALECT, Dialect


class EmptyInputError(ValueError):
    """Raised when a partial update carries no fields."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


@dataclass(frozen=True)
class ClauseResult:
    set_cols: str
    values: tuple


@dataclass(frozen=True)
class PredicateResult:
    where: str
    values: tuple


@dataclass(frozen=True)
class FilterCriteria:
    """Search filters for jobs. Absent fields add no condition."""

    title: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: bool = False


JOB_FILTER_COLUMNS = {"title": "title", "minSalary": "salary", "hasEquity": "equity"}


def _column(name: str, name_map: Mapping[str, str]) -> str:
    return name_map.get(name) or name


def sql_for_partial_update(
    data: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    dialect: Dialect = DEFAULT_DIALECT,
) -> ClauseResult:
    """
    Build the SET part of an UPDATE statement.

    sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    -> ClauseResult(set_cols='"first_name"=$1, "age"=$2', values=("Aliya", 32))

    Keys are emitted in the mapping's iteration order and value i is bound
    to placeholder i. Names missing from `js_to_sql` are used as-is.
    """
    items = list(data.items())
    if not items:
        raise EmptyInputError()

    cols = [
        f"{dialect.q(_column(name, js_to_sql))}={dialect.placeholder(idx)}"
        for idx, (name, _) in enumerate(items, start=1)
    ]
    return ClauseResult(
        set_cols=", ".join(cols),
        values=tuple(value for _, value in items),
    )


def sql_for_job_filter(
    criteria: FilterCriteria,
    column_map: Optional[Mapping[str, str]] = None,
    dialect: Dialect = DEFAULT_DIALECT,
    start: int = 1,
) -> PredicateResult:
    """
    Build the WHERE conditions for a job search.

    Conditions come in a fixed order (title, minSalary, hasEquity) and are
    joined with AND. Placeholders are numbered from `start` over the
    conditions actually present, so skipped filters leave no gaps.
    Returns an empty `where` when nothing is filtered.
    """
    column_map = JOB_FILTER_COLUMNS if column_map is None else column_map
    conditions: list[str] = []
    values: list[Any] = []

    def bind(value: Any) -> str:
        values.append(value)
        return dialect.placeholder(start + len(values) - 1)

    if criteria.title is not None:
        column = dialect.q(_column("title", column_map))
        conditions.append(f"{column} {dialect.ilike} {bind(f'%{criteria.title}%')}")

    if criteria.min_salary is not None:
        column = dialect.q(_column("minSalary", column_map))
        conditions.append(f"{column} >= {bind(criteria.min_salary)}")

    if criteria.has_equity is True:
        column = dialect.q(_column("hasEquity", column_map))
        conditions.append(f"{column} > 0")

    return PredicateResult(where=" AND ".join(conditions), values=tuple(values))
