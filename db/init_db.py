"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Vehicles: registration date is stamped by the database at insert time
CREATE TABLE IF NOT EXISTS vehicle (
    vehicle_id          BIGINT PRIMARY KEY,
    vehicle_class_id    INT NOT NULL,
    user_id             INT NOT NULL,
    plate               VARCHAR(20) NOT NULL,
    chassis_id          VARCHAR(40),
    axles               INT NOT NULL,
    weight              INT NOT NULL,
    country             VARCHAR(60) NOT NULL,
    registration_date   DATE NOT NULL DEFAULT CURRENT_DATE
);

-- On-board units: one per vehicle, status is a free-form token
CREATE TABLE IF NOT EXISTS on_board_unit (
    unit_id             BIGINT PRIMARY KEY,
    vehicle_id          BIGINT NOT NULL REFERENCES vehicle(vehicle_id) ON DELETE CASCADE,
    status              TEXT
);

-- Toll charges: billable events recorded against an on-board unit
CREATE TABLE IF NOT EXISTS toll_charge (
    toll_id             INT PRIMARY KEY,
    unit_id             BIGINT NOT NULL REFERENCES on_board_unit(unit_id) ON DELETE CASCADE
);

-- Road segments: read-only classification used for rate determination
CREATE TABLE IF NOT EXISTS road_segment (
    segment_id          INT PRIMARY KEY,
    length              INT NOT NULL,
    start_coordinate    VARCHAR(60),
    end_coordinate      VARCHAR(60),
    name                VARCHAR(100),
    segment_type        VARCHAR(20) NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_road_segment_type ON road_segment(segment_type);
CREATE INDEX IF NOT EXISTS idx_toll_charge_unit ON toll_charge(unit_id);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL on the given connection and commit.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import connect
    connection = connect()
    try:
        create_tables(connection)
    finally:
        connection.close()
    print("Database schema created successfully.")
