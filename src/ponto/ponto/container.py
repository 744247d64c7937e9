from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo

from .certificates.service import JustifiedAbsenceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .hours.service import BankHoursService
from .overtime.mysql_overtime_repository import MySQLOvertimeRepository
from .overtime.service import OvertimeService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .timerecords.location import LocationValidator
from .timerecords.mysql_time_record_repository import MySQLTimeRecordRepository
from .timerecords.service import PunchService
from .vacations.mysql_vacation_repository import MySQLVacationRepository
from .vacations.service import VacationService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    tz: ZoneInfo

    employees_repo: MySQLEmployeeRepository
    settings_repo: MySQLSettingsRepository
    time_records_repo: MySQLTimeRecordRepository
    vacations_repo: MySQLVacationRepository
    overtime_repo: MySQLOvertimeRepository

    punch_service: PunchService
    bank_hours_service: BankHoursService
    vacation_service: VacationService
    overtime_service: OvertimeService
    justified_absence_service: JustifiedAbsenceService


def build_container(
    *,
    db_config: dict,
    timezone: str,
    location_validator: LocationValidator | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    tz = ZoneInfo(timezone)

    employees_repo = MySQLEmployeeRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)
    time_records_repo = MySQLTimeRecordRepository(conn)
    vacations_repo = MySQLVacationRepository(conn)
    overtime_repo = MySQLOvertimeRepository(conn)

    punch_service = PunchService(
        time_records_repo,
        employees_repo,
        tz=tz,
        location_validator=location_validator or LocationValidator(),
    )
    bank_hours_service = BankHoursService(time_records_repo, employees_repo, settings_repo, tz=tz)
    vacation_service = VacationService(vacations_repo, employees_repo, settings_repo, tz=tz)
    overtime_service = OvertimeService(overtime_repo, employees_repo, settings_repo, tz=tz)
    justified_absence_service = JustifiedAbsenceService(time_records_repo, employees_repo)

    return Container(
        conn=conn,
        tz=tz,
        employees_repo=employees_repo,
        settings_repo=settings_repo,
        time_records_repo=time_records_repo,
        vacations_repo=vacations_repo,
        overtime_repo=overtime_repo,
        punch_service=punch_service,
        bank_hours_service=bank_hours_service,
        vacation_service=vacation_service,
        overtime_service=overtime_service,
        justified_absence_service=justified_absence_service,
    )
