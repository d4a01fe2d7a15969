"""
repositories/toll_gateway.py
----------------------------
Data access layer for the toll domain.
All SQL touching the vehicle, on_board_unit, toll_charge and road_segment
tables lives here.

The gateway works on a single connection handed in by the caller and never
commits, rolls back or closes it; the caller owns the transaction.
"""

import psycopg2

from db.exceptions import ConfigurationError, DataAccessError
from models.road_segment import RoadSegment
from models.vehicle import Vehicle
from utils.logger import get_logger

logger = get_logger(__name__)


class TollDataGateway:
    """Repository for vehicles, on-board units, toll charges and road segments."""

    def __init__(self, connection=None):
        self._connection = connection

    def bind_connection(self, connection) -> None:
        """Use `connection` for all subsequent operations. Not validated here."""
        self._connection = connection

    def _get_connection(self):
        if self._connection is None:
            raise ConfigurationError("Connection not set")
        return self._connection

    # ── ON-BOARD UNITS ────────────────────────────────────

    def get_on_board_unit_status(self, unit_id: int) -> str:
        """
        Look up the status of an on-board unit.

        Returns:
            The stored status, or an empty string if the unit does not exist
            or has no status recorded.

        Raises:
            DataAccessError: If the query fails in the database.
        """
        sql = "SELECT status FROM on_board_unit WHERE unit_id = %s;"
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (unit_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch status for on-board unit {unit_id}: {e}", exc_info=True)
            raise DataAccessError(
                "Failed to fetch on-board unit status.",
                operation="get_on_board_unit_status", key=unit_id, cause=e,
            ) from e

        if row is None:
            logger.warning(f"No status found for on-board unit {unit_id}")
            return ""
        return row[0] or ""

    def set_on_board_unit_status(self, unit_id: int, status: str) -> None:
        """
        Store a new status for an on-board unit.

        Raises:
            DataAccessError: If the unit does not exist or the update fails.
        """
        sql = "UPDATE on_board_unit SET status = %s WHERE unit_id = %s;"
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (status, unit_id))
                updated = cur.rowcount
        except psycopg2.Error as e:
            logger.error(f"Failed to update status for on-board unit {unit_id}: {e}", exc_info=True)
            raise DataAccessError(
                "Failed to update on-board unit status.",
                operation="set_on_board_unit_status", key=unit_id, cause=e,
            ) from e

        if updated == 0:
            logger.warning(f"Status of on-board unit {unit_id} not updated, unit may not exist")
            raise DataAccessError(
                f"On-board unit {unit_id} not found or status unchanged.",
                operation="set_on_board_unit_status", key=unit_id,
            )
        logger.info(f"Status of on-board unit {unit_id} set to '{status}'")

    def update_on_board_unit_status(self, unit_id: int) -> None:
        """Placeholder without a status argument; issues no statement."""
        self._get_connection()

    # ── TOLL CHARGES ──────────────────────────────────────

    def resolve_user_for_toll(self, toll_id: int) -> int:
        """
        Resolve the user who incurred a toll charge, following
        toll_charge -> on_board_unit -> vehicle.

        Returns:
            The user id, or 0 if the chain does not resolve.

        Raises:
            DataAccessError: If the query fails in the database.
        """
        sql = """
            SELECT v.user_id
            FROM toll_charge tc
            JOIN on_board_unit obu ON tc.unit_id = obu.unit_id
            JOIN vehicle v ON obu.vehicle_id = v.vehicle_id
            WHERE tc.toll_id = %s;
        """
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (toll_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to resolve user for toll charge {toll_id}: {e}", exc_info=True)
            raise DataAccessError(
                "Failed to resolve user for toll charge.",
                operation="resolve_user_for_toll", key=toll_id, cause=e,
            ) from e

        return row[0] if row else 0

    # ── VEHICLES ──────────────────────────────────────────

    def register_vehicle(
        self,
        vehicle_id: int,
        vehicle_class_id: int,
        user_id: int,
        plate: str,
        chassis_id: str,
        axles: int,
        weight: int,
        country: str,
    ) -> None:
        """
        Insert a new vehicle. The registration date is set by the database
        to the current date.

        Raises:
            DataAccessError: If the insert is rejected (duplicate id,
                constraint violation) or affects no rows.
        """
        sql = """
            INSERT INTO vehicle
                (vehicle_id, vehicle_class_id, user_id, plate, chassis_id,
                 axles, weight, country, registration_date)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, CURRENT_DATE);
        """
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    vehicle_id, vehicle_class_id, user_id, plate,
                    chassis_id, axles, weight, country,
                ))
                inserted = cur.rowcount
        except psycopg2.Error as e:
            logger.error(f"Failed to register vehicle {vehicle_id}: {e}", exc_info=True)
            raise DataAccessError(
                "Failed to register vehicle.",
                operation="register_vehicle", key=vehicle_id, cause=e,
            ) from e

        if inserted == 0:
            logger.warning(f"Vehicle {vehicle_id} could not be registered")
            raise DataAccessError(
                f"Vehicle {vehicle_id} could not be registered.",
                operation="register_vehicle", key=vehicle_id,
            )
        logger.info(f"Registered vehicle {vehicle_id} for user {user_id}")

    def register(self, vehicle: Vehicle) -> None:
        """Register a Vehicle domain object (its registration_date is ignored)."""
        self.register_vehicle(
            vehicle.vehicle_id, vehicle.vehicle_class_id, vehicle.user_id,
            vehicle.plate, vehicle.chassis_id, vehicle.axles,
            vehicle.weight, vehicle.country,
        )

    def delete_vehicle(self, vehicle_id: int) -> None:
        """
        Delete a vehicle by ID.

        Raises:
            DataAccessError: If no such vehicle exists or the delete fails.
        """
        sql = "DELETE FROM vehicle WHERE vehicle_id = %s;"
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (vehicle_id,))
                deleted = cur.rowcount
        except psycopg2.Error as e:
            logger.error(f"Failed to delete vehicle {vehicle_id}: {e}", exc_info=True)
            raise DataAccessError(
                "Failed to delete vehicle.",
                operation="delete_vehicle", key=vehicle_id, cause=e,
            ) from e

        if deleted == 0:
            logger.warning(f"Vehicle {vehicle_id} not deleted, vehicle may not exist")
            raise DataAccessError(
                f"Vehicle {vehicle_id} not found or already deleted.",
                operation="delete_vehicle", key=vehicle_id,
            )
        logger.info(f"Deleted vehicle {vehicle_id}")

    # ── ROAD SEGMENTS ─────────────────────────────────────

    def list_road_segments(self, segment_type: str) -> list[RoadSegment]:
        """
        Fetch all road segments of a given type, in whatever order the
        database returns them.

        Returns:
            List of RoadSegment objects, empty if none match.

        Raises:
            DataAccessError: If the query fails in the database.
        """
        sql = """
            SELECT segment_id, length, start_coordinate, end_coordinate, name, segment_type
            FROM road_segment
            WHERE segment_type = %s;
        """
        conn = self._get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (segment_type,))
                segments = [self._row_to_segment(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            logger.error(f"Failed to list road segments of type '{segment_type}': {e}", exc_info=True)
            raise DataAccessError(
                "Failed to list road segments.",
                operation="list_road_segments", key=segment_type, cause=e,
            ) from e

        logger.info(f"Loaded {len(segments)} road segment(s) of type '{segment_type}'")
        return segments

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_segment(row: tuple) -> RoadSegment:
        """Convert a database row tuple to a RoadSegment domain object."""
        return RoadSegment(
            segment_id=row[0],
            length=row[1],
            start_coordinate=row[2],
            end_coordinate=row[3],
            name=row[4],
            segment_type=row[5],
        )
