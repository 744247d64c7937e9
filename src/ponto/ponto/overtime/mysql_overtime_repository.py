from __future__ import annotations

from typing import Any, Sequence

from ..core.enums import OvertimeStatus, OvertimeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import OvertimeQuery, OvertimeRequest
from .repository import OvertimeRepository


def _to_request(r: dict[str, Any]) -> OvertimeRequest:
    return OvertimeRequest(
        overtime_id=int(r["overtime_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        hours=float(r["hours"]),
        overtime_type=OvertimeType(r["type"]),
        status=OvertimeStatus(r["status"]),
        reason=r.get("reason"),
    )


class MySQLOvertimeRepository(OvertimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, query: OvertimeQuery) -> Sequence[OvertimeRequest]:
        clauses = ["employee_id=%s"]
        params: list[object] = [int(query.employee_id)]
        if query.statuses:
            clauses.append(f"status IN ({in_clause(query.statuses)})")
            params.extend(s.value for s in query.statuses)
        if query.types:
            clauses.append(f"type IN ({in_clause(query.types)})")
            params.extend(t.value for t in query.types)
        if query.start is not None:
            clauses.append("work_date >= %s")
            params.append(query.start)
        if query.end is not None:
            clauses.append("work_date <= %s")
            params.append(query.end)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT overtime_id, employee_id, work_date, hours, type, status, reason
                FROM overtime_requests
                WHERE {' AND '.join(clauses)}
                ORDER BY work_date ASC, overtime_id ASC
                """,
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]
