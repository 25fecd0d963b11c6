from typing import Any

from psycopg import errors
from psycopg.rows import dict_row

from docintake.database.connection import get_connection
from docintake.database.models import UtilityRecord
from docintake.utilities.exceptions import (
    DuplicateUtilityError,
    InvalidUtilityError,
    UtilityNotFoundError,
)
from docintake.utilities.models import UtilityType

_UTILITY_COLUMNS = "id, type, value, description, is_active, created_at, updated_at"


class UtilitiesRepository:
    """Database operations for the utilities catalog table."""

    def list_active(self, utility_type: UtilityType | str | None = None) -> list[UtilityRecord]:
        """Return active entries ordered by value, optionally of one type."""
        query = f"SELECT {_UTILITY_COLUMNS} FROM utilities WHERE is_active"
        params: tuple[Any, ...] = ()
        if utility_type is not None:
            query += " AND type = %s"
            params = (UtilityType.parse(utility_type).value,)
        query += " ORDER BY value ASC"
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, params)
                rows = cur.fetchall()
        return [_to_utility(row) for row in rows]

    def active_values(self, utility_type: UtilityType) -> set[str]:
        return {record.value for record in self.list_active(utility_type)}

    def find_by_id(self, utility_id: int) -> UtilityRecord:
        """Find a catalog entry by ID.

        Raises:
            UtilityNotFoundError: if no entry with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_UTILITY_COLUMNS} FROM utilities WHERE id = %s",
                    (utility_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise UtilityNotFoundError(f"Utility {utility_id} not found")
        return _to_utility(row)

    def create(
        self,
        utility_type: UtilityType | str,
        value: str,
        description: str | None = None,
    ) -> UtilityRecord:
        """Insert a new active entry.

        Raises:
            InvalidUtilityError: if the type is unknown or the value is blank.
            DuplicateUtilityError: if the same type and value already exist.
        """
        parsed_type = UtilityType.parse(utility_type)
        if not value or not value.strip():
            raise InvalidUtilityError("Type and value are required")

        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                try:
                    cur.execute(
                        "INSERT INTO utilities (type, value, description) "
                        f"VALUES (%s, %s, %s) RETURNING {_UTILITY_COLUMNS}",
                        (parsed_type.value, value.strip(), description),
                    )
                except errors.UniqueViolation as exc:
                    raise DuplicateUtilityError("This utility already exists") from exc
                row = cur.fetchone()
                if row is None:
                    raise RuntimeError("Utility insert returned no row")
            conn.commit()
        return _to_utility(row)

    def update(
        self,
        utility_id: int,
        *,
        value: str | None = None,
        description: str | None = None,
        is_active: bool | None = None,
    ) -> UtilityRecord:
        """Change the given fields and bump ``updated_at``.

        Raises:
            UtilityNotFoundError: if no entry with this ID exists.
            DuplicateUtilityError: if the new value collides with another entry.
        """
        changes: dict[str, Any] = {}
        if value is not None:
            if not value.strip():
                raise InvalidUtilityError("Utility value cannot be blank")
            changes["value"] = value.strip()
        if description is not None:
            changes["description"] = description
        if is_active is not None:
            changes["is_active"] = is_active

        assignments = [f"{column} = %s" for column in changes] + ["updated_at = now()"]
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                try:
                    cur.execute(
                        f"UPDATE utilities SET {', '.join(assignments)} "
                        f"WHERE id = %s RETURNING {_UTILITY_COLUMNS}",
                        (*changes.values(), utility_id),
                    )
                except errors.UniqueViolation as exc:
                    raise DuplicateUtilityError("This utility already exists") from exc
                row = cur.fetchone()
                if row is None:
                    raise UtilityNotFoundError(f"Utility {utility_id} not found")
            conn.commit()
        return _to_utility(row)

    def delete(self, utility_id: int) -> None:
        """Delete a catalog entry.

        Raises:
            UtilityNotFoundError: if no entry with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM utilities WHERE id = %s", (utility_id,))
                if cur.rowcount == 0:
                    raise UtilityNotFoundError(f"Utility {utility_id} not found")
            conn.commit()


def _to_utility(row: dict[str, Any]) -> UtilityRecord:
    return UtilityRecord(
        id=row["id"],
        type=row["type"],
        value=row["value"],
        description=row.get("description"),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )
